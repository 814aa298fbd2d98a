# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import listing_service
from . import navigation
from . import predicates
from . import query_executor
from . import specialty_classifier
from . import visit_service

__all__ = [
    "listing_service",
    "navigation",
    "predicates",
    "query_executor",
    "specialty_classifier",
    "visit_service",
]
