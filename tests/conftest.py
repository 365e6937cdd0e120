"""Shared fixtures: an on-disk pages tree and an in-memory store."""

from pathlib import Path

import pytest

from pagelocator.locator import PageLocator
from pagelocator.store import FileInfo, FileSink

# Relative paths of every file in the sample pages tree.
PAGE_FILES = (
    "index.tri",
    "index.json",
    "index_en.tri",
    "one.tri",
    "one.json",
    "one_fr.html",
    "one_fr.json",
    "two.tri",
    "three/index.tri",
    "three/index.json",
    "three/four.tri",
    "three/four.json",
    "three/four_de.tri",
    "three/five.html",
    "three/five.json",
    "three/seven/eight.tri",
    "five/index.html",
    "five/index.json",
    "six/readme.txt",
    "nine/index.tri",
    "both/index.tri",
    "both/index.html",
)


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Create a temporary pages tree for locator tests."""
    pages = tmp_path / "pages"
    for relative in PAGE_FILES:
        target = pages / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.suffix == ".json":
            target.write_text("{}")
        else:
            target.write_text(f"<p>{relative}</p>")
    return pages


@pytest.fixture
def sink(pages_dir: Path) -> FileSink:
    return FileSink(pages_dir)


@pytest.fixture
def locator(sink: FileSink) -> PageLocator:
    return PageLocator(sink)


class MemoryStore:
    """In-memory file store built from a list of file paths.

    Records every requested path in ``calls``. Paths listed in ``broken``
    raise *error* (``PermissionError`` by default) instead of resolving.
    """

    def __init__(
        self,
        files: list[str],
        *,
        broken: tuple[str, ...] = (),
        error: type[Exception] = PermissionError,
    ) -> None:
        self.files = set(files)
        self.broken = set(broken)
        self.error = error
        self.calls: list[str] = []

    def _dirs(self) -> set[str]:
        dirs = {""}
        for path in self.files:
            parts = path.split("/")[:-1]
            for i in range(1, len(parts) + 1):
                dirs.add("/".join(parts[:i]))
        return dirs

    async def get_info(self, path: str) -> FileInfo:
        self.calls.append(path)
        if path in self.broken:
            raise self.error(path)
        name = path.rpartition("/")[2]
        if path in self.files:
            return FileInfo(name=name, relative_path=path)
        dirs = self._dirs()
        if path not in dirs:
            raise FileNotFoundError(path)
        prefix = f"{path}/" if path else ""
        children = []
        for entry in sorted(self.files | dirs):
            if not entry or not entry.startswith(prefix):
                continue
            rest = entry[len(prefix) :]
            if not rest or "/" in rest:
                continue
            children.append(FileInfo(name=rest, relative_path=entry, is_directory=entry in dirs))
        return FileInfo(name=name, relative_path=path, is_directory=True, children=tuple(children))


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore(list(PAGE_FILES))


@pytest.fixture
def make_store():
    """Build a :class:`MemoryStore` from custom file lists."""
    return MemoryStore
