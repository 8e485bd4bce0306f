"""Blob command - read a file or URL as binary string or data URL."""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..downloaders.blob_reader import BlobReadError, BlobReader

console = Console()


class BlobCommand:
    """Read a blob source and print it."""

    def __init__(self, source: str, as_base64: bool = False, mime_type: Optional[str] = None):
        self.source = source
        self.as_base64 = as_base64
        self.mime_type = mime_type

    async def execute_async(self) -> int:
        """Execute the blob command."""
        try:
            if self.as_base64:
                result = await BlobReader.to_data_url_async(self.source, self.mime_type)
            else:
                result = await BlobReader.to_binary_string_async(self.source)
            console.print(result, markup=False, highlight=False, soft_wrap=True)
            return 0

        except BlobReadError as ex:
            cause = f": {escape(str(ex.__cause__))}" if ex.__cause__ else ""
            console.print(f"[red]❌ {ex}{cause}[/]")
            return 1
