"""pagelocator exception hierarchy.

Shared across the store, the locator, and configuration so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from enum import Enum


class PageLocatorError(Exception):
    """Base for all pagelocator-specific errors."""


class ConfigurationError(PageLocatorError):
    """Raised when locator configuration is invalid.

    Raised from ``LocatorConfig.__post_init__`` so bad values never reach
    a running locator.
    """


class ErrorKind(Enum):
    """Closed set of lookup failures, valued by their HTTP-style status."""

    FORBIDDEN = 401
    NOT_FOUND = 404


@dataclass(frozen=True, slots=True)
class LookupFailed(PageLocatorError):
    """A URL could not be resolved to a page.

    Carries the decoded path that failed so callers can log or render it.
    ``status`` maps the kind onto the numeric code a web layer would send.
    """

    kind: ErrorKind
    path: str
    detail: str = ""

    @property
    def status(self) -> int:
        return self.kind.value

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail} ({self.path!r})"
        return f"{self.status}: {self.path!r}"


class Forbidden(LookupFailed):  # noqa: N818
    """401: the path failed the path-safety check."""

    def __init__(self, path: str, detail: str = "Forbidden") -> None:
        super().__init__(kind=ErrorKind.FORBIDDEN, path=path, detail=detail)


class PageNotFound(LookupFailed):  # noqa: N818
    """404: no template matched the path."""

    def __init__(self, path: str, detail: str = "Not Found") -> None:
        super().__init__(kind=ErrorKind.NOT_FOUND, path=path, detail=detail)
