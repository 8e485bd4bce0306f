import re
import unicodedata
from typing import Any


class TextUtils:
    """Utilities for digit extraction and text cleanup."""

    NON_DIGITS = re.compile(r"\D", re.ASCII)
    DIGITS = re.compile(r"\d", re.ASCII)
    REPEATED_SPACES = re.compile(r" {2,}")

    ACCENTS_MAP = {
        "A": "ÁÀÃÂÄ",
        "a": "áàãâä",
        "E": "ÉÈÊË",
        "e": "éèêë",
        "I": "ÍÌÎÏ",
        "i": "íìîï",
        "O": "ÓÒÔÕÖ",
        "o": "óòôõö",
        "U": "ÚÙÛÜ",
        "u": "úùûü",
        "C": "Ç",
        "c": "ç",
        "N": "Ñ",
        "n": "ñ",
    }
    _ACCENTS_TABLE = str.maketrans(
        {accented: plain for plain, chars in ACCENTS_MAP.items() for accented in chars}
    )

    @staticmethod
    def _as_text(value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @staticmethod
    def extract_digits(value: Any) -> str:
        """Keep only the numeric characters of the value."""
        return TextUtils.NON_DIGITS.sub("", TextUtils._as_text(value))

    @staticmethod
    def remove_digits(value: Any) -> str:
        """Remove numeric characters from the value."""
        return TextUtils.DIGITS.sub("", TextUtils._as_text(value))

    @staticmethod
    def remove_accents(text: str, strict: bool = False) -> str:
        """
        Replace accented characters by their unaccented equivalent.

        The default mode only knows the Portuguese/Spanish letters in ACCENTS_MAP.
        Strict mode decomposes the text (NFD) and drops every combining mark.
        """
        text = TextUtils._as_text(text)
        if strict:
            decomposed = unicodedata.normalize("NFD", text)
            return "".join(c for c in decomposed if not unicodedata.combining(c))
        return text.translate(TextUtils._ACCENTS_TABLE)

    @staticmethod
    def remove_repeated_spaces(text: str) -> str:
        """Trim the text and collapse runs of spaces into a single one."""
        return TextUtils.REPEATED_SPACES.sub(" ", TextUtils._as_text(text).strip())

    @staticmethod
    def clean_text(text: Any, remove_repeated_spaces: bool = True, remove_accents: bool = True, strict: bool = False) -> str:
        """Apply the cleanup helpers of this class in sequence."""
        text = TextUtils._as_text(text)
        if not text:
            return text
        if remove_repeated_spaces:
            text = TextUtils.remove_repeated_spaces(text)
        if remove_accents:
            text = TextUtils.remove_accents(text, strict)
        return text
