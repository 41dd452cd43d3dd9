"""
Exception hierarchy for grafen.

All errors raised by the package derive from GrafenError so callers can catch
the whole family at once, while the concrete classes also derive from the
matching builtin (ValueError, RuntimeError) for code that already expects those.
"""


class GrafenError(Exception):
    """Base class for all grafen errors."""


class ConstructionError(GrafenError, ValueError):
    """
    Invalid geometry parameters passed to a constructor.

    Raised for non-positive lengths, widths, radii, heights, densities or
    lattice constants. Construction either fully succeeds or raises this;
    no partially built component is ever returned.
    """


class SamplingError(GrafenError, RuntimeError):
    """
    Internal invariant of a sampling algorithm was violated.

    This indicates a defect (e.g. two Poisson-disc points registered in the
    same background grid cell) and is never caught inside the package.
    """


class ConfigError(GrafenError, ValueError):
    """Malformed configuration dictionary or file."""
