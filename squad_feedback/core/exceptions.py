"""Exceptions raised by the feedback service and mapped to HTTP responses."""


class FeedbackError(Exception):
    """Base exception for feedback service errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(FeedbackError):
    """A referenced template, event, user or form does not exist."""

    status_code = 404


class InvalidRequestError(FeedbackError):
    """The request conflicts with a form's lifecycle or anonymity rules."""

    status_code = 400


class StorageError(FeedbackError):
    """The persistence gateway reported a failure."""

    status_code = 400


class RecordNotFoundError(StorageError):
    """A lookup by id matched no row."""

    def __init__(self, table: str, record_id: object) -> None:
        self.table = table
        self.record_id = record_id
        super().__init__(f"No {table} row found with id {record_id}")


class ConstraintError(StorageError):
    """An insert or update violated a database constraint."""


class StructureValidationError(FeedbackError):
    """A sections/questions tree failed structural validation."""

    status_code = 422

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid form structure")


class UnexpectedError(FeedbackError):
    """Any other failure while handling a request; the cause stays server-side."""
