"""Validate command - check a CPF, CNPJ or e-mail."""
from typing import Optional

from rich.console import Console

from ..utils.cnpj_utils import CnpjUtils
from ..utils.contact_utils import ContactUtils
from ..utils.cpf_utils import CpfUtils
from ..utils.document_utils import DocumentUtils

console = Console()


class ValidateCommand:
    """Validate a single value."""

    KINDS = ("cpf", "cnpj", "email")

    def __init__(self, value: str, kind: Optional[str] = None):
        kind = kind or ("email" if "@" in value else DocumentUtils.kind(value))
        if kind not in self.KINDS:
            raise ValueError("Documento inválido. Informe um CPF (11 dígitos) ou CNPJ (14 dígitos).")
        self.value = value
        self.kind = kind

    def is_valid(self) -> bool:
        if self.kind == "cpf":
            return CpfUtils.is_valid(self.value)
        if self.kind == "cnpj":
            return CnpjUtils.is_valid(self.value)
        return ContactUtils.is_valid_email(self.value)

    def execute(self) -> int:
        """Execute the validate command."""
        label = self.kind.upper() if self.kind != "email" else "E-mail"
        if self.is_valid():
            console.print(f"[green]✅ {label} válido[/]")
            return 0
        console.print(f"[red]❌ {label} inválido[/]")
        return 1
