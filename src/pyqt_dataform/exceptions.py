"""Data form exceptions."""


class DataFormError(Exception):
    """Base class for all pyqt-dataform errors."""


class MalformedViewError(DataFormError, TypeError):
    """Raised when a View (or one of its parts) has the wrong shape."""


class MalformedFormValueError(DataFormError, TypeError):
    """Raised when a form value is not a mapping or carries a malformed range."""


class DuplicateViewNameError(DataFormError, ValueError):
    """Raised when two views in one collection share a name."""


class SubmitNotAvailableError(DataFormError, RuntimeError):
    """Raised when a submit event reaches a controller that updates on change."""
