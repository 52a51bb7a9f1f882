"""
Base domain exceptions.
"""


class VitrineException(Exception):
    """Base exception for all Vitrine domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(VitrineException):
    """Raised when entity is not found in repository."""

    def __init__(
        self, entity_type: str, entity_id: str, message: str | None = None
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        message = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class DuplicateEntityError(VitrineException):
    """Raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, identifier: str):
        message = f"{entity_type} with {identifier} already exists"
        super().__init__(message, code="DUPLICATE_ENTITY")


class ValidationError(VitrineException):
    """Raised when entity validation fails."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")


class InternalError(VitrineException):
    """Raised when an invariant breaks inside the service."""

    def __init__(
        self,
        message: str = "Something went wrong on our side",
        code: str = "INTERNAL_ERROR",
    ):
        super().__init__(message, code=code)
