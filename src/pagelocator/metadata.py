"""Companion metadata detection.

Every template may have a ``<base>.json`` sibling carrying structured data.
Detection works purely from a directory listing that was already fetched.
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import TypeVar

from pagelocator.paths import join
from pagelocator.store import FileInfo
from pagelocator.types import AlternatePage, ResolvedPage

METADATA_EXTENSION = "json"

_PageT = TypeVar("_PageT", ResolvedPage, AlternatePage)


def metadata_name(base_name: str) -> str:
    return f"{base_name}.{METADATA_EXTENSION}"


def attach_metadata(
    page: _PageT,
    base_name: str,
    parent_path: str,
    siblings: Mapping[str, FileInfo],
) -> _PageT:
    """Return *page* with its metadata fields filled in.

    Looks up ``<base_name>.json`` in *siblings*. When present the sibling's
    relative path is recorded and ``metadata_exists`` is True. Otherwise
    the path it would have under *parent_path* is recorded and
    ``metadata_exists`` is False. Never performs I/O.

    Args:
        page: The page or alternate being built.
        base_name: Template name without extension.
        parent_path: Relative directory holding the template.
        siblings: The directory's entries keyed by file name.

    Returns:
        A copy of *page* with ``metadata`` and ``metadata_exists`` set.
    """
    name = metadata_name(base_name)
    sibling = siblings.get(name)
    if sibling is not None:
        return replace(page, metadata=sibling.relative_path, metadata_exists=True)
    return replace(page, metadata=join(parent_path, name), metadata_exists=False)
