import re
from typing import Any, Optional

from .text_utils import TextUtils


class CnpjUtils:
    """Utilities for CNPJ validation and formatting."""

    LENGTH = 14
    BASE_LENGTH = 12
    FORMAT_PATTERN = re.compile(r"^(\d{2})(\d{3})(\d{3})(\d{4})(\d{2})$", re.ASCII)
    KNOWN_INVALID = frozenset(digit * 14 for digit in "0123456789")

    @staticmethod
    def remove_mask(cnpj: Optional[Any]) -> str:
        """Remove mask from CNPJ (dots, slashes, hyphens and any other non-digit)."""
        if not cnpj:
            return ""
        return TextUtils.extract_digits(cnpj)

    @staticmethod
    def _check_digit(digits: str) -> int:
        """Weights start at len - 7, descend, and wrap from 2 back to 9."""
        total = 0
        weight = len(digits) - 7
        for digit in digits:
            total += int(digit) * weight
            weight -= 1
            if weight < 2:
                weight = 9
        remainder = total % 11
        return 0 if remainder < 2 else 11 - remainder

    @staticmethod
    def check_digits(base: str) -> str:
        """Compute both check digits for the 12-digit CNPJ base."""
        raw = CnpjUtils.remove_mask(base)
        if len(raw) != CnpjUtils.BASE_LENGTH:
            raise ValueError(f"CNPJ base must have 12 digits. Received: {len(raw)}")
        first = CnpjUtils._check_digit(raw)
        second = CnpjUtils._check_digit(raw + str(first))
        return f"{first}{second}"

    @staticmethod
    def is_valid(cnpj: Optional[Any]) -> bool:
        """Validate CNPJ length, known placeholder sequences and both check digits."""
        raw = CnpjUtils.remove_mask(cnpj)

        if len(raw) != CnpjUtils.LENGTH:
            return False

        if raw in CnpjUtils.KNOWN_INVALID:
            return False

        if CnpjUtils._check_digit(raw[:12]) != int(raw[12]):
            return False

        return CnpjUtils._check_digit(raw[:13]) == int(raw[13])

    @staticmethod
    def format(cnpj: Any) -> Any:
        """Format as 00.000.000/0000-00. Values without exactly 14 digits are returned untouched."""
        raw = TextUtils.extract_digits(cnpj)
        if len(raw) != CnpjUtils.LENGTH:
            return cnpj
        return CnpjUtils.FORMAT_PATTERN.sub(r"\1.\2.\3/\4-\5", raw)
