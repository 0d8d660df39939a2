"""
models/errors.py
----------------
Error taxonomy shared by the models and repositories.

Every error carries a stable, user-presentable ``message``. Store-level
details never go into that message: wrappers chain the driver exception as
``__cause__`` and the repository logs it.
"""


class LunchlyError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LunchlyError):
    """Bad input from the caller. Always raised before any I/O."""


class DuplicatePhoneError(LunchlyError):
    """A customer with the same non-empty phone number already exists."""

    def __init__(self, phone: str):
        super().__init__("A customer with this phone number already exists.")
        self.phone = phone


class NotFoundError(LunchlyError):
    """No row matches the requested id."""


class InvalidStateError(LunchlyError):
    """The operation needs a record that has already been saved."""


class PersistenceError(LunchlyError):
    """Opaque wrapper over a store failure."""


class FetchError(PersistenceError):
    """A read from the store failed."""


class SaveError(PersistenceError):
    """A write to the store failed."""
