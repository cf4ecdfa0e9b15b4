"""Mandatory generator for basic meta tags and site verification tags."""
from wikiseo.constants import FACEBOOK_APP_ID_KEY, MANDATORY_GENERATOR, SITE_VERIFICATION_TAGS
from wikiseo.services.generators.base import Generator, meta_property


class MetaTag(Generator):
    """Adds description, keywords and robots tags plus verification keys.

    Always runs first so the baseline tags are present even when an
    optional generator fails.
    """

    identifier = MANDATORY_GENERATOR

    # Metadata key -> meta tag name
    TAGS = {
        "description": "description",
        "keywords": "keywords",
        "robots": "robots",
        "google_bot": "googlebot",
    }

    def add_metadata(self) -> None:
        for key, tag_name in self.TAGS.items():
            value = self.get(key)
            if value:
                self.sink.add_meta_tag(tag_name, value)

        self.add_site_verification()
        self.add_facebook_app_id()

    def add_site_verification(self) -> None:
        """Add one verification tag per configured search engine key."""
        for setting, tag_name in SITE_VERIFICATION_TAGS.items():
            key = getattr(self.settings, setting, None)
            if key and key.strip():
                self.sink.add_meta_tag(tag_name, key.strip())

    def add_facebook_app_id(self) -> None:
        app_id = self.settings.FACEBOOK_APP_ID
        if not app_id or not app_id.strip():
            return

        self.sink.add_head_item(FACEBOOK_APP_ID_KEY, meta_property(FACEBOOK_APP_ID_KEY, app_id.strip()))
