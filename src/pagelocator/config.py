"""Locator configuration.

LocatorConfig is a frozen dataclass, validated once at construction.
"""

from dataclasses import dataclass

from pagelocator.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class LocatorConfig:
    """Locator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = LocatorConfig(template_extensions=("html",))

    Attributes:
        index_names: Base names tried, in order, when a URL names a directory.
        template_extensions: Accepted template extensions without the dot.
            Order is the tie-break when several candidates exist.
    """

    index_names: tuple[str, ...] = ("index",)
    template_extensions: tuple[str, ...] = ("tri", "html")

    def __post_init__(self) -> None:
        if isinstance(self.index_names, str) or isinstance(self.template_extensions, str):
            raise ConfigurationError("index_names and template_extensions must be sequences, not str")
        # Accept lists at the call site but store tuples.
        object.__setattr__(self, "index_names", tuple(self.index_names))
        object.__setattr__(self, "template_extensions", tuple(self.template_extensions))

        if not self.index_names:
            raise ConfigurationError("index_names must not be empty")
        if not self.template_extensions:
            raise ConfigurationError("template_extensions must not be empty")
        for name in self.index_names:
            if not name or "/" in name:
                raise ConfigurationError(f"Invalid index name: {name!r}")
        for ext in self.template_extensions:
            if not ext or ext.startswith(".") or "/" in ext:
                raise ConfigurationError(
                    f"Invalid template extension: {ext!r} (give it without the leading dot)"
                )
