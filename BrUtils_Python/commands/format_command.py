"""Format command - apply pt-BR punctuation to a value."""
import math

from rich.console import Console

from ..config import get_config
from ..utils.cnpj_utils import CnpjUtils
from ..utils.contact_utils import ContactUtils
from ..utils.cpf_utils import CpfUtils
from ..utils.document_utils import DocumentUtils
from ..utils.number_utils import NumberUtils

console = Console()


class FormatCommand:
    """Format a value according to its kind."""

    KINDS = ("documento", "cpf", "cnpj", "cep", "telefone", "numero", "tamanho")

    def __init__(self, value: str, kind: str = "documento"):
        if kind not in self.KINDS:
            raise ValueError(f"Tipo inválido: {kind}. Use um de: {', '.join(self.KINDS)}.")
        if kind in ("numero", "tamanho"):
            try:
                number = float(value)
            except ValueError:
                number = math.nan
            if not math.isfinite(number):
                raise ValueError(f"Valor numérico inválido: {value}")
        self.value = value
        self.kind = kind

    def render(self) -> str:
        config = get_config()

        if self.kind == "cpf":
            return CpfUtils.format(self.value)
        if self.kind == "cnpj":
            return CnpjUtils.format(self.value)
        if self.kind == "cep":
            return ContactUtils.format_cep(self.value)
        if self.kind == "telefone":
            return ContactUtils.format_phone(self.value)
        if self.kind == "numero":
            return NumberUtils.format_number(self.value, config.numbers.decimal_places)
        if self.kind == "tamanho":
            size = float(self.value)
            if size.is_integer():
                size = int(size)
            return NumberUtils.human_size(size, config.numbers.binary_sizes)
        return DocumentUtils.format(self.value)

    def execute(self) -> int:
        """Execute the format command."""
        console.print(self.render(), markup=False, highlight=False)
        return 0
