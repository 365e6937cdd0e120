"""Candidate file names for template probing."""

from collections.abc import Iterable, Sequence

from pagelocator.paths import strip_extension

# Separates a page's base name from its alternate key: ``index_en.tri``.
ALTERNATE_SEPARATOR = "_"


def candidate_names(base_names: Iterable[str], extensions: Sequence[str]) -> list[str]:
    """Build the ordered ``base.ext`` names to probe.

    Extensions cycle fastest, so every extension of the first base name is
    tried before the second base name. The first candidate present in a
    directory wins.

        >>> candidate_names(["index", "home"], ["tri", "html"])
        ['index.tri', 'index.html', 'home.tri', 'home.html']
    """
    return [f"{base}.{ext}" for base in base_names for ext in extensions]


def is_template_filename(name: str, extensions: Iterable[str]) -> bool:
    """Return True when *name* ends with one of the accepted extensions."""
    return any(name.endswith("." + ext) for ext in extensions)


def alternate_key(name: str, base: str) -> str | None:
    """Extract the alternate key from ``<base>_<key>.<ext>``.

    Returns ``None`` when *name* is not an alternate of *base*, including
    the degenerate ``<base>_.<ext>`` whose key would be empty.
    """
    prefix = base + ALTERNATE_SEPARATOR
    if not name.startswith(prefix):
        return None
    key = strip_extension(name)[len(prefix) :]
    return key or None
