import asyncio
import shlex
import shutil
import sys
from typing import List, Optional

from rich.console import Console

console = Console()


class ClipboardClient:
    """Client for the platform clipboard tools."""

    CANDIDATES = (
        ["pbcopy"],
        ["clip"],
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    )

    @classmethod
    def _get_command(cls) -> Optional[List[str]]:
        """Configured command, or the first clipboard tool found on PATH."""
        from ..config import get_config
        config = get_config()
        if config.clipboard.command.strip():
            return shlex.split(config.clipboard.command)

        for args in cls.CANDIDATES:
            if shutil.which(args[0]):
                return list(args)
        return None

    @classmethod
    async def copy_text_async(cls, text: str) -> bool:
        """Write the text to the clipboard."""
        args = cls._get_command()
        if not args:
            console.print("[yellow]⚠️ Nenhuma ferramenta de área de transferência encontrada[/]")
            return False

        # clip.exe reads the console code page, UTF-16 is the safe choice there
        encoding = "utf-16" if sys.platform == "win32" and args[0] == "clip" else "utf-8"

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE
            )

            _, stderr = await process.communicate((text or "").encode(encoding))

            ok = process.returncode == 0
            if not ok and stderr:
                console.print(f"[yellow]⚠️ {args[0]} falhou: {stderr.decode('utf-8', errors='ignore')}[/]")

            return ok

        except OSError as ex:
            console.print(f"[yellow]⚠️ Erro ao copiar para a área de transferência: {ex}[/]")
            return False
