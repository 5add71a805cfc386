"""Exceptions shared across the kneeboard package."""


class KneeboardError(Exception):
    """Base exception for all kneeboard errors."""


class InvalidAngleError(KneeboardError, ValueError):
    """Raised when an angle is built from a non-finite value (NaN or infinity).

    Malformed numeric input is an invariant violation, not a recoverable
    condition: the core never catches it.
    """

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Angle must be a finite number of degrees, got {value!r}")


class PlanFileError(KneeboardError):
    """Raised when a plan definition file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
