"""Open Graph and article:* tags for link previews."""
from datetime import datetime, timezone
from typing import List, Optional

from wikiseo.services.generators.base import Generator, meta_property
from wikiseo.services.generators.image_resolver import resolve_image
from wikiseo.services.metadata.constants import METADATA_CONSTANTS
from wikiseo.utils.url_utils import protocolize_url

ISO_8601_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC. Naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(ISO_8601_FORMAT)


def split_keywords(keywords: Optional[str]) -> List[str]:
    """Split a comma-delimited keyword string into trimmed, non-empty tokens."""
    if not keywords:
        return []
    return [token.strip() for token in keywords.split(METADATA_CONSTANTS.KEYWORD_DELIMITER) if token.strip()]


class OpenGraph(Generator):
    """Open Graph generator.

    Every tag is added as a head item keyed by its property, rendered as
    ``<meta property="og:..." content="..."/>``.
    """

    identifier = "OpenGraph"

    DEFAULT_TYPE = "article"

    # Metadata key -> property, emitted verbatim when present
    SIMPLE_PROPERTIES = {
        "locale": "og:locale",
        "description": "og:description",
        "author": "article:author",
        "section": "article:section",
    }

    def add_metadata(self) -> None:
        self._add("og:type", self.get("type") or self.DEFAULT_TYPE)
        self._add("og:site_name", self.get("site_name") or self.settings.SITE_NAME)
        self._add("og:title", self.get("title") or self.page.title)
        self._add("og:url", protocolize_url(self.page.full_url, self.page.protocol))

        for key, prop in self.SIMPLE_PROPERTIES.items():
            self._add(prop, self.get(key))

        self.add_image()
        self.add_revision_timestamps()
        self.add_article_tags()

    def add_image(self) -> None:
        image = resolve_image(self.metadata, self.page, self.settings)
        if image is None:
            return

        self._add("og:image", image.url)
        if image.width:
            self._add("og:image:width", str(image.width))
        if image.height:
            self._add("og:image:height", str(image.height))
        self._add("og:image:alt", image.alt)

    def add_revision_timestamps(self) -> None:
        """Add published and modified times.

        An explicit published_time is used verbatim; otherwise the first
        revision's timestamp is used. The modified time always comes from
        the latest revision.
        """
        published = self.get("published_time")
        if not published and self.page.first_revision_at is not None:
            published = format_timestamp(self.page.first_revision_at)
        self._add("article:published_time", published)

        if self.page.latest_revision_at is not None:
            self._add("article:modified_time", format_timestamp(self.page.latest_revision_at))

    def add_article_tags(self) -> None:
        """Add one article:tag per keyword, in keyword order."""
        for index, keyword in enumerate(split_keywords(self.get("keywords"))):
            key = "article:tag" if index == 0 else f"article:tag:{index}"
            self.sink.add_head_item(key, meta_property("article:tag", keyword))

    def _add(self, prop: str, content: Optional[str]) -> None:
        if not content:
            return
        self.sink.add_head_item(prop, meta_property(prop, content))
