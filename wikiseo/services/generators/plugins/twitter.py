"""Twitter card meta tags."""
from wikiseo.services.generators.base import Generator
from wikiseo.services.generators.image_resolver import resolve_image


class Twitter(Generator):
    identifier = "Twitter"

    def add_metadata(self) -> None:
        self._add("twitter:card", self.settings.TWITTER_CARD_TYPE)
        self._add("twitter:site", self.get("twitter_site") or self.settings.TWITTER_SITE)
        self._add("twitter:title", self.get("title") or self.page.title)
        self._add("twitter:description", self.get("description"))

        image = resolve_image(self.metadata, self.page, self.settings)
        if image is not None:
            self._add("twitter:image", image.url)
            self._add("twitter:image:alt", image.alt)

    def _add(self, name: str, content) -> None:
        if content and content.strip():
            self.sink.add_meta_tag(name, content.strip())
