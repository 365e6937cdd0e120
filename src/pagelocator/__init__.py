"""pagelocator - map request URLs to template and metadata files.

Routing layer for template-driven content servers: picks the template
for a URL, detects its ``.json`` metadata sibling, and lists alternate
versions (languages, experiment variants) of the same page.

Basic usage::

    from pagelocator import FileSink, PageLocator

    locator = PageLocator(FileSink("./pages"))
    page = await locator.locate("/products/widget")
    page.template        # "products/widget.tri"
    page.metadata_exists # True when products/widget.json exists
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AlternatePage",
    "ConfigurationError",
    "ErrorKind",
    "FileInfo",
    "FileSink",
    "FileStore",
    "Forbidden",
    "LocatorConfig",
    "LookupFailed",
    "PageLocator",
    "PageLocatorError",
    "PageNotFound",
    "ResolvedPage",
    "is_allowed_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagelocator`` fast while providing a clean top-level API.
    """
    if name == "PageLocator":
        from pagelocator.locator import PageLocator

        return PageLocator

    if name == "LocatorConfig":
        from pagelocator.config import LocatorConfig

        return LocatorConfig

    if name in ("FileInfo", "FileSink", "FileStore"):
        from pagelocator import store as _store

        return getattr(_store, name)

    if name in ("AlternatePage", "ResolvedPage"):
        from pagelocator import types as _types

        return getattr(_types, name)

    if name == "is_allowed_path":
        from pagelocator.security import is_allowed_path

        return is_allowed_path

    if name in (
        "ConfigurationError",
        "ErrorKind",
        "Forbidden",
        "LookupFailed",
        "PageLocatorError",
        "PageNotFound",
    ):
        from pagelocator import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
