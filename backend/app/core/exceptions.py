"""
Custom exceptions for the application.
"""

from typing import Optional


class ValidationError(Exception):
    """Raised when a query parameter fails a field-level format rule.

    The field name is kept so the message can be rendered next to the
    matching input of the search form.
    """

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    @property
    def message(self) -> str:
        """Human readable message, e.g. 'Telephone must contain only numeric characters'."""
        return f"{self.field.capitalize()} {self.reason}"


class EntityNotFoundError(Exception):
    """
    Raised when a detail lookup targets an owner or vet id that does not exist.
    Controllers map it to a 404 page.
    """

    def __init__(self, entity: str, entity_id: Optional[int]):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
