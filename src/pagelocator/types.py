"""Value types returned by the page locator.

Immutable frozen dataclasses holding plain path strings and flags. Built
fresh for every lookup; nothing here refers back to the file store.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class AlternatePage:
    """An alternate version of a page, e.g. another language.

    Attributes:
        template: Relative path of the alternate's template.
        metadata: Where the alternate's metadata file lives or would live.
        metadata_exists: Whether that metadata file was found.
    """

    template: str
    metadata: str = ""
    metadata_exists: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "template": self.template,
            "metadata": self.metadata,
            "metadataExists": self.metadata_exists,
        }


@dataclass(frozen=True, slots=True)
class ResolvedPage:
    """The files that render one URL.

    ``metadata`` is always populated, even when no file exists there;
    check ``metadata_exists`` rather than the path.

    Attributes:
        template: Relative path of the selected template.
        metadata: Where the companion ``.json`` file lives or would live.
        metadata_exists: Whether the metadata file was found.
        alternatives: Alternate key to :class:`AlternatePage`. Unordered;
            sort the keys for deterministic iteration.
        exact: True when the URL named the template file directly. Exact
            matches never carry alternatives.
    """

    template: str
    metadata: str = ""
    metadata_exists: bool = False
    alternatives: dict[str, AlternatePage] = field(default_factory=dict)
    exact: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Plain nested mapping with string and boolean leaves.

        Suitable as a JSON response body. ``alternatives`` is left out for
        exact-file matches.
        """
        data: dict[str, Any] = {
            "template": self.template,
            "metadata": self.metadata,
            "metadataExists": self.metadata_exists,
        }
        if not self.exact:
            data["alternatives"] = {
                key: alt.to_dict() for key, alt in self.alternatives.items()
            }
        return data
