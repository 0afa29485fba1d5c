"""Error types raised by the off-axis projection pipeline."""


class OffaxisError(Exception):
    """Base class for all off-axis projection errors."""


class MissingDependencyError(OffaxisError):
    """A required transform or camera reference has not been assigned."""

    def __init__(self, missing, message=None):
        self.missing = tuple(missing)
        if message is None:
            names = ", ".join(f"'{name}'" for name in self.missing)
            message = f"[OffaxisProjection] missing required reference(s): {names}"
        super().__init__(message)


class DegenerateGeometryError(OffaxisError, ValueError):
    """Screen extents or clip planes do not describe a valid frustum."""
