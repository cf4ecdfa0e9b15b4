"""Pipeline constants that never change across environments.

These are fixed contracts with the host wiki and with search engines:
property names, tag names and user-facing messages.
"""

# ===== Page Properties =====
PAGE_PROP_NAME = "WikiSEO"

# ===== Input Modes =====
MODE_TAG = "tag"
MODE_PARSER = "parser"

# ===== Site Verification =====
# Settings field -> meta tag name. Tag names are read by the search engines
# and must match exactly.
SITE_VERIFICATION_TAGS = {
    "GOOGLE_SITE_VERIFICATION_KEY": "google-site-verification",
    "NORTON_SITE_VERIFICATION_KEY": "norton-safeweb-site-verification",
    "PINTEREST_SITE_VERIFICATION_KEY": "p:domain_verify",
    "ALEXA_SITE_VERIFICATION_KEY": "alexaVerifyID",
    "YANDEX_SITE_VERIFICATION_KEY": "yandex-verification",
    "BING_SITE_VERIFICATION_KEY": "msvalidate.01",
}
FACEBOOK_APP_ID_KEY = "fb:app_id"

# ===== Generators =====
MANDATORY_GENERATOR = "MetaTag"

# ===== User-Facing Messages =====
MESSAGE_EMPTY_ATTRIBUTES = {
    MODE_TAG: "No valid metadata attributes were given via the <seo> tag.",
    MODE_PARSER: "No valid metadata attributes were given via the {{#seo:}} parser function.",
}
MESSAGE_INVALID_GENERATOR = "Invalid metadata generator: {name}"
MESSAGE_GENERATOR_FAILED = "Metadata generator {name} failed: {error}"
MESSAGE_MISSING_PAGE_TITLE = "Page title is missing, stored metadata could not be loaded."

# ===== HTML =====
ERROR_BOX_CLASS = "errorbox"
