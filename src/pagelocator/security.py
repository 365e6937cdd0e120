"""Path safety validation for content lookups.

Rejects decoded URL paths that could reach outside the content root
before any store access happens.

Usage::

    from pagelocator.security import is_allowed_path

    if not is_allowed_path(decoded):
        raise Forbidden(decoded)
"""

import re

# "C:" style drive prefixes
_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def is_allowed_path(path: str) -> bool:
    """Check whether *path* is safe to look up under the content root.

    A path is allowed when it is a relative, ``/``-separated path that
    stays inside the root:

    - The empty path (the root itself) is allowed
    - Must **not** contain a ``..`` segment
    - Must **not** contain NUL bytes or backslashes
    - Must **not** start with ``~`` or a drive letter

    Examples::

        >>> is_allowed_path("three/four")
        True
        >>> is_allowed_path("")
        True
        >>> is_allowed_path("../etc/passwd")
        False
        >>> is_allowed_path("three/../../secret")
        False
    """
    if not isinstance(path, str):
        return False
    if "\x00" in path or "\\" in path:
        return False
    if path.startswith("~") or _DRIVE_RE.match(path):
        return False
    return ".." not in path.split("/")
