"""Exceptions raised while controlling a target process."""


class ControllerError(Exception):
    """Base class for failures reported by the anti-cheat components."""

    code = "UNKNOWN"

    def describe(self) -> str:
        """Return the error as ``CODE: message``."""
        return f"{self.code}: {self}"


class InternalError(ControllerError):
    """An operating-system call failed unexpectedly."""

    code = "INTERNAL"


class FailedPreconditionError(ControllerError):
    """An operation was requested in a state that does not allow it."""

    code = "FAILED_PRECONDITION"