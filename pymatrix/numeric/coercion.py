"""
Conversion of single entries between numeric modes.

Widening into COMPLEX is lossless for every value a float can hold.
Narrowing is either lossy by contract (REAL -> INTEGER truncates toward
zero) or refused with UnsupportedCoercionError (COMPLEX -> INTEGER,
COMPLEX with a non-zero imaginary part -> REAL, ints too large for a
float -> REAL or COMPLEX).
"""

from __future__ import annotations

import warnings

from pymatrix.core.exceptions import PrecisionLossWarning, UnsupportedCoercionError
from pymatrix.numeric.modes import NumericMode


def _out_of_range(value: int, target_mode: NumericMode) -> UnsupportedCoercionError:
    return UnsupportedCoercionError(
        f"Integer with {value.bit_length()} bits is out of range for {target_mode.value} mode",
        value=value,
        target_mode=target_mode,
    )


def coerce(value: int | float | complex, target_mode: NumericMode) -> int | float | complex:
    """
    Convert a single entry into target_mode.

    Args:
        value: A validated int, float or complex
        target_mode: Mode to convert into

    Returns:
        The value as the target mode's Python type

    Raises:
        UnsupportedCoercionError: If the conversion is not defined

    Warns:
        PrecisionLossWarning: If a float with a fractional part is
            truncated into an int
    """
    if target_mode is NumericMode.COMPLEX:
        try:
            return complex(value)
        except OverflowError as e:
            raise _out_of_range(value, target_mode) from e

    if target_mode is NumericMode.INTEGER:
        if isinstance(value, complex):
            raise UnsupportedCoercionError(
                f"Cannot coerce complex value {value!r} to integer mode",
                value=value,
                target_mode=target_mode,
            )
        if isinstance(value, int):
            return value
        truncated = int(value)
        if truncated != value:
            warnings.warn(
                f"Truncating {value!r} to {truncated} in integer mode",
                PrecisionLossWarning,
                stacklevel=2,
            )
        return truncated

    if isinstance(value, complex):
        if value.imag != 0:
            raise UnsupportedCoercionError(
                f"Cannot coerce complex value {value!r} with non-zero imaginary part to real mode",
                value=value,
                target_mode=target_mode,
            )
        return value.real
    try:
        return float(value)
    except OverflowError as e:
        raise _out_of_range(value, target_mode) from e
