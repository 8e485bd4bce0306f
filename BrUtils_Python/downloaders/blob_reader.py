import asyncio
import base64
import inspect
import mimetypes
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import aiohttp
from rich.console import Console

console = Console()

BlobSource = Union[bytes, bytearray, memoryview, str, os.PathLike, Any]

DEFAULT_MIME_TYPE = "application/octet-stream"


class BlobReadError(RuntimeError):
    """Raised when a blob source cannot be read."""


class BlobReader:
    """Read binary content from bytes, file objects, local paths or http(s) URLs."""

    @staticmethod
    def _is_url(source: Any) -> bool:
        return isinstance(source, str) and source.lower().startswith(("http://", "https://"))

    @classmethod
    async def read_async(cls, blob: BlobSource) -> Tuple[bytes, str]:
        """Read the whole blob. Returns its bytes and a best-effort MIME type."""
        if isinstance(blob, (bytes, bytearray, memoryview)):
            return bytes(blob), DEFAULT_MIME_TYPE

        if cls._is_url(blob):
            return await cls._fetch_async(blob)

        if isinstance(blob, (str, os.PathLike)):
            path = Path(blob)
            data = await asyncio.to_thread(path.read_bytes)
            mime_type, _ = mimetypes.guess_type(path.name)
            return data, mime_type or DEFAULT_MIME_TYPE

        if hasattr(blob, "read"):
            data = blob.read()
            if inspect.isawaitable(data):
                data = await data
            if isinstance(data, str):
                raise TypeError("Blob file objects must be opened in binary mode")
            mime_type, _ = mimetypes.guess_type(str(getattr(blob, "name", "")))
            return bytes(data), mime_type or DEFAULT_MIME_TYPE

        raise TypeError(f"Unsupported blob source: {type(blob).__name__}")

    @classmethod
    async def _fetch_async(cls, url: str) -> Tuple[bytes, str]:
        """Download the blob with aiohttp."""
        from ..config import get_config
        config = get_config()

        timeout = aiohttp.ClientTimeout(total=config.blob.timeout_seconds)
        console.print(f"[blue]Acessando:[/] [white]{url}[/]")
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url, headers={"User-Agent": config.blob.user_agent}) as resp:
                resp.raise_for_status()
                data = await resp.read()
                return data, resp.content_type or DEFAULT_MIME_TYPE

    @classmethod
    async def to_binary_string_async(cls, blob: BlobSource) -> str:
        """Convert the blob to a binary string (one character per byte)."""
        try:
            data, _ = await cls.read_async(blob)
        except (OSError, aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise BlobReadError("Erro ao ler Blob como string binaria.") from ex
        return data.decode("latin-1")

    @classmethod
    async def to_data_url_async(cls, blob: BlobSource, mime_type: Optional[str] = None) -> str:
        """Convert the blob to a base64 data URL (data:<mime>;base64,<payload>)."""
        try:
            data, detected_type = await cls.read_async(blob)
        except (OSError, aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise BlobReadError("Erro ao ler Blob como string base64.") from ex
        payload = base64.b64encode(data).decode("ascii")
        return f"data:{mime_type or detected_type};base64,{payload}"
