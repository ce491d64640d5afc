class SignalError(Exception):
    """Base exception for all signal simulator errors."""
    pass

class ValidationError(SignalError):
    """Raised when simulation input is malformed or out of range."""
    pass

class StorageError(SignalError):
    """Raised when the history store cannot be reached."""
    pass

class InternalError(SignalError):
    """Raised for unexpected failures. The message never exposes internals."""
    pass

class ConfigurationError(SignalError):
    """Raised when configuration is invalid."""
    pass
