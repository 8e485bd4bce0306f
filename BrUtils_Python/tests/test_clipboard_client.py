"""Tests for ClipboardClient module."""
import asyncio
import shutil

import pytest

from BrUtils_Python.config import AppConfig, ClipboardSettings, set_config
from BrUtils_Python.exporters.clipboard_client import ClipboardClient


class FakeProcess:
    def __init__(self, returncode=0, stderr=b""):
        self.returncode = returncode
        self._stderr = stderr
        self.received = None

    async def communicate(self, data=None):
        self.received = data
        return b"", self._stderr


@pytest.fixture(autouse=True)
def default_config():
    set_config(AppConfig.default())
    yield
    set_config(AppConfig.default())


@pytest.fixture
def spawned(monkeypatch):
    """Record subprocess calls instead of running them."""
    calls = []
    process = FakeProcess()

    async def fake_exec(*args, **kwargs):
        calls.append(args)
        return process

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_exec)
    return calls, process


def test_copy_with_detected_tool(monkeypatch, spawned):
    """Test the first tool found on PATH is used."""
    calls, process = spawned
    monkeypatch.setattr(shutil, "which", lambda name: "/usr/bin/xclip" if name == "xclip" else None)

    assert asyncio.run(ClipboardClient.copy_text_async("olá"))
    assert calls == [("xclip", "-selection", "clipboard")]
    assert process.received == "olá".encode("utf-8")


def test_copy_with_configured_command(monkeypatch, spawned):
    """Test the configured command takes precedence."""
    calls, _ = spawned
    config = AppConfig.default()
    config.clipboard = ClipboardSettings(command="my-copy --primary")
    set_config(config)
    monkeypatch.setattr(shutil, "which", lambda name: "/usr/bin/" + name)

    assert asyncio.run(ClipboardClient.copy_text_async("texto"))
    assert calls == [("my-copy", "--primary")]


def test_copy_without_tool(monkeypatch, spawned):
    """Test missing clipboard tools return False."""
    calls, _ = spawned
    monkeypatch.setattr(shutil, "which", lambda name: None)

    assert not asyncio.run(ClipboardClient.copy_text_async("texto"))
    assert calls == []


def test_copy_tool_failure(monkeypatch, spawned):
    """Test a non-zero exit code returns False."""
    _, process = spawned
    process.returncode = 1
    process._stderr = b"no display"
    monkeypatch.setattr(shutil, "which", lambda name: "/usr/bin/" + name)

    assert not asyncio.run(ClipboardClient.copy_text_async("texto"))


def test_copy_spawn_error(monkeypatch):
    """Test OSError while spawning returns False."""
    async def broken_exec(*args, **kwargs):
        raise FileNotFoundError("pbcopy")

    monkeypatch.setattr(asyncio, "create_subprocess_exec", broken_exec)
    monkeypatch.setattr(shutil, "which", lambda name: "/usr/bin/" + name)

    assert not asyncio.run(ClipboardClient.copy_text_async("texto"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
