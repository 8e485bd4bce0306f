import re
from typing import Any, Optional

from .text_utils import TextUtils


class CpfUtils:
    """Utilities for CPF validation and formatting."""

    LENGTH = 11
    FORMAT_PATTERN = re.compile(r"^(\d{3})(\d{3})(\d{3})(\d{2})$", re.ASCII)
    KNOWN_INVALID = frozenset(digit * 11 for digit in "0123456789")

    @staticmethod
    def _check_digit(digits: str) -> int:
        """Weights descend from len + 1 to 2."""
        weight = len(digits) + 1
        total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
        result = 11 - total % 11
        return 0 if result >= 10 else result

    @staticmethod
    def check_digits(base: str) -> str:
        """Compute both check digits for the 9-digit CPF base."""
        raw = TextUtils.extract_digits(base)
        if len(raw) != 9:
            raise ValueError(f"CPF base must have 9 digits. Received: {len(raw)}")
        first = CpfUtils._check_digit(raw)
        second = CpfUtils._check_digit(raw + str(first))
        return f"{first}{second}"

    @staticmethod
    def is_valid(cpf: Optional[Any]) -> bool:
        """Validate CPF length, known placeholder sequences and both check digits."""
        raw = TextUtils.extract_digits(cpf)
        if len(raw) != CpfUtils.LENGTH or raw in CpfUtils.KNOWN_INVALID:
            return False

        # 1st digit
        if CpfUtils._check_digit(raw[:9]) != int(raw[9]):
            return False

        # 2nd digit
        return CpfUtils._check_digit(raw[:10]) == int(raw[10])

    @staticmethod
    def format(cpf: Any) -> Any:
        """Format as 000.000.000-00. Values without exactly 11 digits are returned untouched."""
        raw = TextUtils.extract_digits(cpf)
        if len(raw) != CpfUtils.LENGTH:
            return cpf
        return CpfUtils.FORMAT_PATTERN.sub(r"\1.\2.\3-\4", raw)
