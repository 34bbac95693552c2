"""Helpers for capability interfaces built on `abc.ABC.__subclasshook__`."""


def has_capability(cls: type, *names: str) -> bool:
    """Return True if `cls` (or a base class) defines every named callable."""
    return all(
        any(callable(klass.__dict__.get(name)) for klass in cls.__mro__)
        for name in names
    )
