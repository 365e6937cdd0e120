"""Resolve URLs to the template and metadata files that render them.

A page is a template plus an optional ``<base>.json`` metadata file. The
template is selected in one of three ways:

1. The URL names the template exactly, like ``/products/widget.html``.
   Template and metadata are found; alternatives are not.

2. The URL names a directory, like ``/products``. The first file in it
   matching one of the index names with an accepted extension wins
   (``products/index.tri``). Metadata and alternatives are found.

3. The URL names a page but not a file, like ``/products/widget`` (the
   typical case). The parent directory is searched for ``widget`` with an
   accepted extension. Metadata and alternatives are found.

Alternatives are other versions of the same page, named
``<base>_<key>.<ext>``: A/B variants, translations. Which one to render
is left to the caller.
"""

import logging
from collections.abc import Callable
from dataclasses import replace

from pagelocator.candidates import (
    ALTERNATE_SEPARATOR,
    alternate_key,
    candidate_names,
    is_template_filename,
)
from pagelocator.config import LocatorConfig
from pagelocator.errors import Forbidden, PageNotFound
from pagelocator.metadata import attach_metadata, metadata_name
from pagelocator.paths import (
    decode_uri,
    join,
    normalize,
    split_parent_and_name,
    strip_extension,
)
from pagelocator.security import is_allowed_path
from pagelocator.store import FileInfo, FileStore, entries_by_name
from pagelocator.types import AlternatePage, ResolvedPage

logger = logging.getLogger("pagelocator")


class PageLocator:
    """Finds the page files for a URL within a file store.

    Each :meth:`locate` call is independent: sibling listings are fetched
    and keyed per call, and nothing is cached, so concurrent lookups are
    safe.

    Usage::

        locator = PageLocator(FileSink("./pages"))
        page = await locator.locate("/three/four")
        page.template       # "three/four.tri"
        page.alternatives   # {"de": AlternatePage(template="three/four_de.tri", ...)}
    """

    __slots__ = ("_config", "_is_allowed", "_sink")

    def __init__(
        self,
        sink: FileStore,
        config: LocatorConfig | None = None,
        *,
        is_allowed: Callable[[str], bool] = is_allowed_path,
    ) -> None:
        self._sink = sink
        self._config = config or LocatorConfig()
        self._is_allowed = is_allowed

    @property
    def config(self) -> LocatorConfig:
        return self._config

    @property
    def sink(self) -> FileStore:
        return self._sink

    async def locate(self, url: str) -> ResolvedPage:
        """Get the files representing the page for *url*.

        Leading and trailing slashes are ignored, so ``/two``, ``two`` and
        ``/two/`` resolve identically.

        Args:
            url: The URL path of the page, percent-encoded or not. Escaped
                reserved characters such as ``%2F`` stay encoded.

        Returns:
            A :class:`ResolvedPage`, for example::

                ResolvedPage(
                    template="index.tri",
                    metadata="index.json",
                    metadata_exists=True,
                    alternatives={
                        "en": AlternatePage(
                            template="index_en.tri",
                            metadata="index_en.json",
                            metadata_exists=False,
                        ),
                    },
                )

        Raises:
            Forbidden: The decoded path failed the path-safety check.
            PageNotFound: No template matches the URL.
        """
        file_path = normalize(decode_uri(url or ""))
        if not self._is_allowed(file_path):
            logger.warning("Rejected unsafe page path %r", file_path)
            raise Forbidden(file_path)

        info = await self._get_info(file_path)

        if info is not None and not info.is_directory:
            return await self._locate_exact(file_path, info)

        if info is not None:
            # The URL names a directory: look for an index template in it.
            parent = info
            candidates = candidate_names(self._config.index_names, self._config.template_extensions)
        else:
            # The URL names a page: look for it in the parent directory.
            parent_path, file_name = split_parent_and_name(file_path)
            parent = await self._get_info(parent_path)
            if parent is None or not parent.is_directory:
                raise PageNotFound(file_path, "Parent directory does not exist")
            candidates = candidate_names(
                [strip_extension(file_name)], self._config.template_extensions
            )

        siblings = entries_by_name(parent.children)
        found = next((name for name in candidates if name in siblings), None)
        if found is None:
            logger.debug("No template among %s for %r", candidates, file_path)
            raise PageNotFound(file_path)

        return self._build_page(found, siblings)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _get_info(self, path: str) -> FileInfo | None:
        try:
            return await self._sink.get_info(path)
        except OSError as exc:
            logger.debug("No store entry for %r: %s", path, exc)
            return None

    async def _locate_exact(self, file_path: str, info: FileInfo) -> ResolvedPage:
        """Build the page for a URL that names a file directly.

        Metadata existence is checked with its own store call since no
        sibling listing was fetched. That check is best-effort: any failure
        from the store, not only the ``OSError`` of the store contract,
        counts as "no metadata".
        """
        parent_path, file_name = split_parent_and_name(file_path)
        metadata = join(parent_path, metadata_name(strip_extension(file_name)))
        try:
            await self._sink.get_info(metadata)
        except Exception as exc:
            logger.debug("No metadata at %r: %r", metadata, exc)
            metadata_exists = False
        else:
            metadata_exists = True
        logger.debug("Exact file match %r (metadata %s)", info.relative_path, metadata_exists)
        return ResolvedPage(
            template=info.relative_path,
            metadata=metadata,
            metadata_exists=metadata_exists,
            exact=True,
        )

    def _build_page(self, found: str, siblings: dict[str, FileInfo]) -> ResolvedPage:
        """Assemble the page for a matched sibling, with metadata and alternatives."""
        template = siblings[found].relative_path
        parent_path, _ = split_parent_and_name(template)
        base = strip_extension(found)

        page = attach_metadata(ResolvedPage(template=template), base, parent_path, siblings)

        extensions = self._config.template_extensions
        names = [name for name in siblings if is_template_filename(name, extensions)]
        # Extension order decides between alternates sharing a key.
        names.sort(key=lambda name: _extension_rank(name, extensions))

        alternatives: dict[str, AlternatePage] = {}
        for name in names:
            key = alternate_key(name, base)
            if key is None or key in alternatives:
                continue
            alternatives[key] = attach_metadata(
                AlternatePage(template=siblings[name].relative_path),
                base + ALTERNATE_SEPARATOR + key,
                parent_path,
                siblings,
            )

        logger.debug("Resolved %r with %d alternative(s)", template, len(alternatives))
        return replace(page, alternatives=alternatives)


def _extension_rank(name: str, extensions: tuple[str, ...]) -> int:
    for rank, ext in enumerate(extensions):
        if name.endswith("." + ext):
            return rank
    return len(extensions)
