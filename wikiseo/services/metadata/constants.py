"""Constants for the metadata service."""
from enum import Enum


class TitleMode(str, Enum):
    """How the metadata title is combined with the page title."""
    REPLACE = "replace"
    APPEND = "append"
    PREPEND = "prepend"


class METADATA_CONSTANTS:
    """Constants for metadata validation and normalization."""

    # Canonical attribute names accepted by the validator
    VALID_PARAMS = (
        "title",
        "title_mode",
        "title_separator",
        "description",
        "keywords",
        "robots",
        "google_bot",
        "image",
        "image_width",
        "image_height",
        "image_alt",
        "type",
        "site_name",
        "locale",
        "section",
        "author",
        "published_time",
        "twitter_site",
    )

    # Alternative spellings (after lower-casing) -> canonical name
    ALIASES = {
        "og:title": "title",
        "titlemode": "title_mode",
        "title-mode": "title_mode",
        "titleseparator": "title_separator",
        "title-separator": "title_separator",
        "separator": "title_separator",
        "og:description": "description",
        "tags": "keywords",
        "article:tag": "keywords",
        "googlebot": "google_bot",
        "google-bot": "google_bot",
        "og:image": "image",
        "og:image:width": "image_width",
        "image-width": "image_width",
        "og:image:height": "image_height",
        "image-height": "image_height",
        "og:image:alt": "image_alt",
        "image-alt": "image_alt",
        "og:type": "type",
        "og:site_name": "site_name",
        "sitename": "site_name",
        "site-name": "site_name",
        "og:locale": "locale",
        "article:section": "section",
        "article:author": "author",
        "article:published_time": "published_time",
        "published-time": "published_time",
        "twitter:site": "twitter_site",
        "twitter-site": "twitter_site",
    }

    # Keys whose value may be a list of strings
    REPEATABLE_PARAMS = {"image"}

    # Keys whose list input is joined into one comma-delimited string
    DELIMITED_PARAMS = {"keywords"}

    # Keys that must hold a positive integer
    INTEGER_PARAMS = {"image_width", "image_height"}

    # Keys compared case-insensitively and stored lower-cased
    LOWERCASE_PARAMS = {"title_mode", "type"}

    KEYWORD_DELIMITER = ","
    KEYWORD_JOINER = ", "

    VALID_TITLE_MODES = {mode.value for mode in TitleMode}
    DEFAULT_TITLE_MODE = TitleMode.REPLACE.value
    DEFAULT_TITLE_SEPARATOR = " - "
