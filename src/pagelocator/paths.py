"""Pure string helpers for content-relative paths.

Paths handled here are URL-style: ``/`` separated, relative to the
content root, never touching the filesystem.
"""

import posixpath
import re
import string
from typing import Any
from urllib.parse import unquote

# Whitespace is stripped alongside separators so "/ a /" cannot leave a
# separator behind.
_STRIP_CHARS = string.whitespace + "/"

# Escapes of ; / ? : @ & = + $ , #
_RESERVED_ESCAPE_RE = re.compile(r"%(?:2[346BCFbcf]|3[ABDFabdf]|40)")


def normalize(path: Any) -> Any:
    """Trim whitespace and every leading and trailing ``/``.

    Non-string or empty input is returned unchanged, so ``None`` passes
    through. Idempotent::

        >>> normalize("  /three/four/ ")
        'three/four'
        >>> normalize("///")
        ''
    """
    if not path or not isinstance(path, str):
        return path
    return path.strip(_STRIP_CHARS)


def split_parent_and_name(path: str) -> tuple[str, str]:
    """Split a path into ``(parent, name)`` after normalizing it.

    ``"three/seven/eight"`` gives ``("three/seven", "eight")``; a path
    without a separator has an empty parent.
    """
    path = normalize(path) or ""
    parent, sep, name = path.rpartition("/")
    if not sep:
        return "", path
    return parent, name


def strip_extension(name: str) -> str:
    """Remove the final ``.ext`` segment; only the last one (``a.b.c`` -> ``a.b``)."""
    stem, sep, _ = name.rpartition(".")
    if not sep:
        return name
    return stem


def join(parent: str, name: str) -> str:
    """Join *name* onto *parent* syntactically. An empty parent yields *name*."""
    if not parent:
        return name
    return posixpath.join(parent, name)


def decode_uri(path: str) -> str:
    """Percent-decode *path*, leaving escaped reserved characters encoded.

    ``%20`` becomes a space but ``%2F`` stays ``%2F``, so an encoded slash
    names a file rather than adding a path segment::

        >>> decode_uri("about%20us/a%2Fb")
        'about us/a%2Fb'
    """
    return unquote(_RESERVED_ESCAPE_RE.sub(lambda m: "%25" + m.group(0)[1:], path))
