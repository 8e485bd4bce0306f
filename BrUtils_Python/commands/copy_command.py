"""Copy command - send a text to the clipboard."""
from rich.console import Console

from ..exporters.clipboard_client import ClipboardClient

console = Console()


class CopyCommand:
    """Copy a text to the clipboard."""

    def __init__(self, text: str):
        self.text = text

    async def execute_async(self) -> int:
        """Execute the copy command."""
        if await ClipboardClient.copy_text_async(self.text):
            console.print("[green]✅ Texto copiado para a área de transferência[/]")
            return 0
        console.print("[red]❌ Não foi possível copiar o texto[/]")
        return 1
