from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    HAS_DEPENDENTS = "has_dependents"
    INVALID_REFERENCE = "invalid_reference"
    VALIDATION = "validation_error"
    UNCLASSIFIED = "server_error"


class CatalogError(Exception):
    """
    Base class for failures raised by the catalog services.

    The boundary picks the response status from `kind`, never from the
    message text.
    """

    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    default_message: str = "Catalog operation failed"

    def __init__(self, message: str | None = None):
        self.message: str = message or self.default_message
        super().__init__(self.message)


class NotFoundError(CatalogError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class HasDependentsError(CatalogError):
    kind = ErrorKind.HAS_DEPENDENTS
    default_message = "Resource still has dependent records"


class InvalidReferenceError(CatalogError):
    kind = ErrorKind.INVALID_REFERENCE
    default_message = "Referenced resource does not exist"
