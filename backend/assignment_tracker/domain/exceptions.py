"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class MissingFieldError(Exception):
    """Raised when a required field is absent or empty on create."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class PersistenceError(Exception):
    """Raised when the store cannot write its backing file.

    The operation that triggered the write has already been rolled back
    in memory by the time this propagates.
    """

    def __init__(self, path: str, reason: Exception):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write store file '{path}': {reason}")


class AssignmentApiError(Exception):
    """Raised by the HTTP client when the assignment API answers with an error status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")
