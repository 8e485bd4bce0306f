import math
from typing import Union

Number = Union[int, float, str]


class NumberUtils:
    """Utilities for pt-BR number formatting."""

    DECIMAL_PREFIXES = ("k", "M", "G")
    BINARY_PREFIXES = ("Ki", "Mi", "Gi")

    @staticmethod
    def format_number(number: Number, decimals: int = 2) -> str:
        """
        Format a number with comma as decimal separator and dot as thousands separator.

        Falsy values (0, "", None) become "0". Strings are parsed as floats and a
        non-numeric string raises ValueError.
        """
        if not number:
            return "0"
        if not isinstance(number, (int, float)):
            number = float(str(number).strip())
        if not math.isfinite(number):
            raise ValueError(f"Non-finite number: {number}")
        formatted = f"{number:,.{decimals}f}"
        return formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    @staticmethod
    def human_size(size: Union[int, float], binary: bool = False) -> str:
        """Convert a size in bytes to kB/MB/GB (base 1000) or KiB/MiB/GiB (base 1024)."""
        base = 1024 if binary else 1000
        if size < base:
            return f"{size} B"
        prefixes = NumberUtils.BINARY_PREFIXES if binary else NumberUtils.DECIMAL_PREFIXES
        unit = -1
        while abs(size) >= base and unit < len(prefixes) - 1:
            size /= base
            unit += 1
        return f"{size:.1f} {prefixes[unit]}B"
