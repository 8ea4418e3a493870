"""Application email – content-type dispatch policy."""
from __future__ import annotations

from collections.abc import Collection, Iterable

__all__ = ["ContentTypePolicy", "only", "should_render"]


def should_render(content_type: str, allow_list: Collection[str]) -> bool:
    """Return ``True`` when *content_type* may be rendered.

    An empty *allow_list* lets every content type through; otherwise the
    match is an exact string comparison.
    """
    if not allow_list:
        return True
    return content_type in allow_list


class ContentTypePolicy:
    """Allow-list of body content types a sender renders and opens."""

    def __init__(self, allowed: Iterable[str] = ()) -> None:
        self._allowed: frozenset[str] = frozenset(allowed)

    @property
    def allowed(self) -> frozenset[str]:
        return self._allowed

    def allows(self, content_type: str) -> bool:
        return should_render(content_type, self._allowed)

    def __repr__(self) -> str:
        return f"ContentTypePolicy(allowed={sorted(self._allowed)!r})"


def only(*content_types: str) -> ContentTypePolicy:
    """Build a policy restricted to *content_types*, e.g. ``only("text/html")``."""
    return ContentTypePolicy(content_types)
