import enum


class ErrorKind(enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class QuartermasterError(Exception):
    kind = ErrorKind.INTERNAL

    def __init__(self, message=None):
        self.message = message or self.__class__.__doc__ or self.kind.value
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.kind.value, "message": self.message}


class ValidationError(QuartermasterError):
    kind = ErrorKind.VALIDATION

class NotFoundError(QuartermasterError):
    kind = ErrorKind.NOT_FOUND

class ConflictError(QuartermasterError):
    kind = ErrorKind.CONFLICT

class InternalError(QuartermasterError):
    kind = ErrorKind.INTERNAL


class MissingFieldError(ValidationError):
    """Required fields are missing."""

class InvalidFieldError(ValidationError):
    """A field has an invalid value."""

class LoanAlreadyReturnedError(ValidationError):
    """This loan has already been returned."""

class BorrowerNotFoundError(NotFoundError):
    """Borrower not found."""

class EquipmentNotFoundError(NotFoundError):
    """Equipment not found."""

class LoanNotFoundError(NotFoundError):
    """Loan not found."""

class OutOfStockError(ConflictError):
    """No units of this equipment are available."""

class BorrowerInUseError(ConflictError):
    """Borrower has active or past loans and cannot be deleted."""

class EquipmentInUseError(ConflictError):
    """Equipment is or was on loan and cannot be deleted."""

class StorageError(InternalError):
    """The store could not complete the request."""

class LoanTransactionError(InternalError):
    """The loan transaction failed and was rolled back."""
