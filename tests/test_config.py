"""Tests for pagelocator.config: LocatorConfig frozen dataclass."""

import pytest

from pagelocator.config import LocatorConfig
from pagelocator.errors import ConfigurationError


class TestLocatorConfig:
    def test_defaults(self) -> None:
        cfg = LocatorConfig()

        assert cfg.index_names == ("index",)
        assert cfg.template_extensions == ("tri", "html")

    def test_override(self) -> None:
        cfg = LocatorConfig(index_names=("index", "home"), template_extensions=("html",))

        assert cfg.index_names == ("index", "home")
        assert cfg.template_extensions == ("html",)

    def test_lists_become_tuples(self) -> None:
        cfg = LocatorConfig(index_names=["home"], template_extensions=["html", "tri"])  # type: ignore[arg-type]

        assert cfg.index_names == ("home",)
        assert cfg.template_extensions == ("html", "tri")

    def test_frozen(self) -> None:
        cfg = LocatorConfig()

        with pytest.raises(AttributeError):
            cfg.index_names = ("home",)  # type: ignore[misc]


class TestLocatorConfigValidation:
    def test_empty_index_names(self) -> None:
        with pytest.raises(ConfigurationError, match="index_names"):
            LocatorConfig(index_names=())

    def test_empty_extensions(self) -> None:
        with pytest.raises(ConfigurationError, match="template_extensions"):
            LocatorConfig(template_extensions=())

    def test_leading_dot_extension(self) -> None:
        with pytest.raises(ConfigurationError, match="leading dot"):
            LocatorConfig(template_extensions=(".html",))

    def test_index_name_with_separator(self) -> None:
        with pytest.raises(ConfigurationError, match="index name"):
            LocatorConfig(index_names=("pages/index",))

    def test_bare_string_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="not str"):
            LocatorConfig(template_extensions="html")  # type: ignore[arg-type]
