"""
Exception taxonomy for causalid.

Every error raised by the library derives from CausalIdError. The
concrete classes also inherit from the matching builtin so that callers
catching ValueError or NotImplementedError keep working.
"""


class CausalIdError(Exception):
    """Base class for all causalid errors."""


class StructureError(CausalIdError, ValueError):
    """The graph structure is invalid (e.g. it contains a directed cycle)."""


class InputError(CausalIdError, ValueError):
    """A supplied node id (or other argument) is out of range or malformed."""


class UnsupportedOperationError(CausalIdError, NotImplementedError):
    """The requested operation is a placeholder and not yet implemented."""


class DependencyMissingError(CausalIdError, RuntimeError):
    """An external collaborator required for the call was not supplied."""

    def __init__(self, dependency: str, hint: str = ""):
        self.dependency = dependency
        message = f"{dependency} is required but was not provided"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)
