# Controllers package initialization
# Each module exposes one Flask blueprint registered by create_app()

from .health_controller import health_bp
from .owner_controller import owner_bp
from .vet_controller import vet_bp
from .visit_controller import visit_bp

__all__ = [
    "health_bp",
    "owner_bp",
    "vet_bp",
    "visit_bp",
]
