import re
from typing import Any

from .text_utils import TextUtils


class ContactUtils:
    """Utilities for CEP, phone number and e-mail handling."""

    EMAIL_PATTERN = re.compile(
        r'(([^<>()\[\]\\/.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
        r"@"
        r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
    )

    @staticmethod
    def format_cep(cep: Any) -> Any:
        """Format a CEP as 00.000-000. Values without 8 digits come back as bare digits."""
        if not cep:
            return cep
        digits = TextUtils.extract_digits(cep)
        if len(digits) != 8:
            return digits
        return f"{digits[:2]}.{digits[2:5]}-{digits[5:]}"

    @staticmethod
    def format_phone(phone: Any) -> str:
        """
        Format a landline or mobile number, with or without area code.

        8 digits:  0000-0000
        9 digits:  00000-0000
        10 digits: (00) 0000-0000
        11 digits: (00) 00000-0000
        Any other length is returned as bare digits.
        """
        digits = TextUtils.extract_digits(phone)
        if len(digits) == 8:
            return f"{digits[:4]}-{digits[4:]}"
        if len(digits) == 9:
            return f"{digits[:5]}-{digits[5:]}"
        if len(digits) == 10:
            return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
        if len(digits) == 11:
            return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
        return digits

    @staticmethod
    def is_valid_email(email: Any) -> bool:
        if not isinstance(email, str):
            return False
        return ContactUtils.EMAIL_PATTERN.fullmatch(email) is not None
