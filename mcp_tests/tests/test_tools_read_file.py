import pytest

from core.errors import ReadError, ValidationError
from stores.memory_store import MemoryFileStore
from tools import read_file as read_file_tool


class FakeStore:
    def __init__(self, out):
        self._out = out
        self.calls = []

    async def read(self, path: str):
        self.calls.append(path)
        return self._out


@pytest.mark.asyncio
async def test_read_file_tool_validates_missing_path(dummy_mcp):
    read_file_tool.register(dummy_mcp, store=None)
    fn = dummy_mcp.tools["read_file"]

    with pytest.raises(ValidationError):
        await fn(path="   ")


@pytest.mark.asyncio
async def test_read_file_tool_uses_injected_store(dummy_mcp):
    read_file_tool.register(dummy_mcp, store=MemoryFileStore({"a.txt": "content"}))
    fn = dummy_mcp.tools["read_file"]

    assert await fn(path="a.txt") == "content"


@pytest.mark.asyncio
async def test_read_file_tool_truncates(dummy_mcp):
    read_file_tool.register(dummy_mcp, store=MemoryFileStore({"a.txt": "a" * 30}))
    fn = dummy_mcp.tools["read_file"]

    out = await fn(path="a.txt", max_chars=10)
    assert out.startswith("a" * 10)
    assert "TRUNCATED" in out


@pytest.mark.asyncio
async def test_read_file_tool_propagates_store_errors(dummy_mcp):
    read_file_tool.register(dummy_mcp, store=MemoryFileStore())
    fn = dummy_mcp.tools["read_file"]

    with pytest.raises(ReadError):
        await fn(path="missing.txt")


@pytest.mark.asyncio
async def test_read_file_tool_calls_factory_and_store(monkeypatch, dummy_mcp):
    fake_store = FakeStore(out="content")
    captured = {}

    def fake_get_file_store(backend, **kwargs):
        captured["backend"] = backend
        captured["kwargs"] = kwargs
        return fake_store

    monkeypatch.setattr(read_file_tool, "get_file_store", fake_get_file_store)
    monkeypatch.setattr(read_file_tool, "STORE_BACKEND", "rooted")
    monkeypatch.setattr(read_file_tool, "STORE_ROOT", "/srv/data")

    read_file_tool.register(dummy_mcp)
    fn = dummy_mcp.tools["read_file"]

    out = await fn(path="a.txt", max_chars=123)

    assert out == "content"
    assert captured == {"backend": "rooted", "kwargs": {"root": "/srv/data"}}
    assert fake_store.calls == ["a.txt"]
