from typing import Any, Optional

from .cnpj_utils import CnpjUtils
from .cpf_utils import CpfUtils
from .text_utils import TextUtils


class DocumentUtils:
    """Dispatch between CPF and CNPJ by digit count."""

    @staticmethod
    def kind(document: Any) -> Optional[str]:
        """Return "cpf", "cnpj" or None according to the number of digits."""
        digits = TextUtils.extract_digits(document)
        if len(digits) == CpfUtils.LENGTH:
            return "cpf"
        if len(digits) == CnpjUtils.LENGTH:
            return "cnpj"
        return None

    @staticmethod
    def format(document: Any) -> Any:
        """Apply CPF or CNPJ punctuation; anything else is returned untouched."""
        digits = TextUtils.extract_digits(document)
        kind = DocumentUtils.kind(digits)
        if kind == "cpf":
            return CpfUtils.format(digits)
        if kind == "cnpj":
            return CnpjUtils.format(digits)
        return document

    @staticmethod
    def is_valid(document: Any) -> bool:
        kind = DocumentUtils.kind(document)
        if kind == "cpf":
            return CpfUtils.is_valid(document)
        if kind == "cnpj":
            return CnpjUtils.is_valid(document)
        return False
