"""
HTML sanitization for post bodies.

``HtmlSanitizer`` enforces the rich-content allow-list with bleach. Elements
whose content must never reach the output (scripts, styles, form widgets)
are removed beforehand with BeautifulSoup, since bleach keeps the inner text
of stripped tags.
"""

from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from bleach.sanitizer import Cleaner
from bs4 import BeautifulSoup

from blog_api.configs import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_SCHEMES,
    ALLOWED_TAGS,
    EXCERPT_LENGTH,
    EXCERPT_SUFFIX,
    NON_TEXT_TAGS,
)


@runtime_checkable
class Sanitizer(Protocol):
    """Protocol for HTML sanitizers used by the post service."""

    def clean(self, html: str) -> str:
        """Return ``html`` reduced to the allow-list."""
        ...

    def to_text(self, html: str) -> str:
        """Return the plain text of ``html`` with every tag removed."""
        ...


class HtmlSanitizer:
    """Allow-list sanitizer backed by bleach and BeautifulSoup."""

    def __init__(
        self,
        tags: Iterable[str] = ALLOWED_TAGS,
        attributes: Mapping[str, list[str]] = ALLOWED_ATTRIBUTES,
        protocols: Iterable[str] = ALLOWED_SCHEMES,
        non_text_tags: Iterable[str] = NON_TEXT_TAGS,
    ) -> None:
        self.non_text_tags = list(non_text_tags)
        self._cleaner = Cleaner(
            tags=frozenset(tags),
            attributes=dict(attributes),
            protocols=frozenset(protocols),
            strip=True,
            strip_comments=True,
        )

    def _parse(self, html: str) -> BeautifulSoup:
        soup = BeautifulSoup(html, "html.parser")
        for element in soup.find_all(self.non_text_tags):
            element.decompose()
        return soup

    def clean(self, html: str) -> str:
        return self._cleaner.clean(str(self._parse(html)))

    def to_text(self, html: str) -> str:
        return self._parse(html).get_text()


def shorten(text: str, limit: int = EXCERPT_LENGTH, suffix: str = EXCERPT_SUFFIX) -> str:
    """
    Cap ``text`` at ``limit`` characters.

    Args:
        text: Plain text to shorten.
        limit: Maximum number of characters kept.
        suffix: Marker appended when the text was cut.

    Returns:
        str: ``text`` unchanged when it fits, otherwise its first ``limit``
        characters followed by ``suffix``.
    """
    if len(text) <= limit:
        return text
    return f"{text[:limit]}{suffix}"
