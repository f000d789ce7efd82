"""
Measura: dimensional-analysis arithmetic over a bounded set of unit exponents.

Measura pairs numeric values with unit vectors (integer exponents over named
dimensions) and derives result units algebraically, rejecting any result whose
exponents fall outside the supported range. Values may be floats, decimals,
fractions or any representation with a registered numeric backend.

The public names below are resolved lazily on first access so importing the
package stays cheap.
"""

import logging
from importlib import import_module
from importlib import metadata as _metadata
from typing import Any

__author__ = "Parneet Sidhu"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("measura")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

_LAZY = {
    "Measure": "measura.core.measure",
    "MeasureType": "measura.core.measure_type",
    "FLOAT_MEASURES": "measura.core.measure_type",
    "DECIMAL_MEASURES": "measura.core.measure_type",
    "FRACTION_MEASURES": "measura.core.measure_type",
    "Unit": "measura.core.unit",
    "DIMENSIONLESS": "measura.core.unit",
    "ExponentDomain": "measura.core.exponents",
    "DEFAULT_DOMAIN": "measura.core.exponents",
    "NumericOperations": "measura.core.numeric",
    "register_operations": "measura.core.numeric",
    "format_unit": "measura.core.utils",
    "MeasuraError": "measura.core.errors",
    "ExponentArithmeticError": "measura.core.errors",
    "UnitMismatchError": "measura.core.errors",
    "MixedNumericBackendError": "measura.core.errors",
}


def __getattr__(name: str) -> Any:
    """Lazy attribute access for the public API."""
    module = _LAZY.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY))


# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__", *_LAZY]
