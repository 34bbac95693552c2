"""Error types raised by the catalog's patterns."""
from typing import Any, Iterable, Optional


class PatternError(Exception):
    """Base exception for all catalog errors."""
    pass


class InvalidArgumentError(PatternError, ValueError):
    """Raised when an input is missing or malformed."""
    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class UnknownTypeError(PatternError, LookupError):
    """Raised when a factory is asked for a variant it does not know."""
    def __init__(self, kind: str, known: Iterable[str] = ()):
        self.known = sorted(known)
        super().__init__(f"Invalid type '{kind}' (known: {', '.join(self.known) or 'none'})")
        self.kind = kind


class NotFoundError(PatternError, LookupError):
    """Raised when a named entry is not in a registry."""
    def __init__(self, resource_type: str, name: str):
        super().__init__(f"{resource_type} {name} does not exist")
        self.resource_type = resource_type
        self.name = name


class PreconditionFailedError(PatternError, RuntimeError):
    """Raised when an operation runs before its required setup."""
    pass


class IncompatibleError(PatternError, TypeError):
    """Raised when a wrapped object lacks the capability a role requires."""
    def __init__(self, message: str, capability: Optional[str] = None):
        super().__init__(message)
        self.capability = capability


class UnsupportedOperationError(IncompatibleError):
    """Raised when no supported operation is available on the target."""
    pass
