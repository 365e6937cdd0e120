"""File store contract and the filesystem-backed implementation.

The locator never touches the filesystem directly. It asks a store for
:class:`FileInfo` records by relative path, so tests and embedding
applications can substitute any source of entries (a directory, an
archive, an in-memory tree).

``FileSink`` runs every blocking filesystem call in a worker thread via
``anyio.to_thread`` so lookups never stall the event loop.
"""

import logging
import os
import posixpath
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

import anyio.to_thread

from pagelocator.paths import normalize

logger = logging.getLogger("pagelocator.store")


@dataclass(frozen=True, slots=True)
class FileInfo:
    """One entry in a file store.

    Attributes:
        name: Raw file name including extension (``""`` for the root).
        relative_path: Canonical ``/``-separated path from the store root.
        is_directory: Whether the entry is a directory.
        children: Direct entries of a directory, sorted by name. Children
            are listed one level deep; their own ``children`` are empty.
    """

    name: str
    relative_path: str
    is_directory: bool = False
    children: tuple["FileInfo", ...] = ()


@runtime_checkable
class FileStore(Protocol):
    """Anything that can describe entries by relative path.

    ``get_info`` must raise ``FileNotFoundError`` (or another ``OSError``)
    when the path does not exist.
    """

    async def get_info(self, path: str) -> FileInfo: ...


def entries_by_name(children: Iterable[FileInfo]) -> dict[str, FileInfo]:
    """Key a directory's children by raw file name.

    Built fresh per lookup; later duplicates replace earlier ones.
    """
    return {child.name: child for child in children}


class FileSink:
    """File store backed by a directory on disk.

    Usage::

        sink = FileSink("./pages")
        info = await sink.get_info("three/four.tri")

    Security: resolves symlinks and verifies the final path is within the
    root. Anything that escapes is reported as missing.
    """

    __slots__ = ("_root",)

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    async def get_info(self, path: str) -> FileInfo:
        """Describe the entry at *path*, listing children for directories."""
        return await anyio.to_thread.run_sync(self._get_info_sync, path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, path: str) -> tuple[Path, str]:
        """Resolve *path* for the containment check.

        Returns the resolved target and the canonical relative path. The
        relative path is built from the requested path, not the resolved
        one, so an in-root symlink keeps its own name just as it does in
        its directory's listing.
        """
        relative = normalize(path) or ""
        if relative:
            relative = posixpath.normpath(relative)
        if not relative or relative == ".":
            return self._root, ""
        try:
            target = (self._root / relative).resolve()
        except (OSError, RuntimeError) as exc:
            # Symlink loops raise RuntimeError from resolve() before 3.13.
            logger.debug("Cannot resolve %r: %s", path, exc)
            raise FileNotFoundError(path) from exc
        if not target.is_relative_to(self._root):
            logger.debug("Path %r escapes store root %s", path, self._root)
            raise FileNotFoundError(path)
        return target, relative

    def _get_info_sync(self, path: str) -> FileInfo:
        target, relative = self._resolve(path)
        if not target.exists():
            raise FileNotFoundError(path)

        name = relative.rpartition("/")[2]
        if not target.is_dir():
            return FileInfo(name=name, relative_path=relative)

        children = []
        with os.scandir(target) as entries:
            for entry in entries:
                child_relative = f"{relative}/{entry.name}" if relative else entry.name
                children.append(
                    FileInfo(
                        name=entry.name,
                        relative_path=child_relative,
                        is_directory=_entry_is_dir(entry),
                    )
                )
        children.sort(key=lambda child: child.name)
        return FileInfo(
            name=name,
            relative_path=relative,
            is_directory=True,
            children=tuple(children),
        )


def _entry_is_dir(entry: os.DirEntry) -> bool:
    # A looping symlink raises instead of reporting a missing target.
    try:
        return entry.is_dir()
    except OSError:
        return False
