"""Input adapters for the <seo> tag and the {{#seo:}} parser function."""
from typing import Callable, Dict, Iterable, Mapping, Optional

# Host hook that expands wikitext (templates, magic words) in a value
Expander = Callable[[str], str]

# Maps a raw attribute name to its canonical name, None if unknown
KeyResolver = Callable[[str], Optional[str]]


class TagParser:
    """Turns authored tag and parser-function input into raw attributes."""

    PART_SEPARATOR = "|"
    KEY_VALUE_SEPARATOR = "="

    def parse_text(self, text: Optional[str]) -> Dict[str, str]:
        """Parse the body of an <seo> tag.

        The body is a list of ``|key=value`` parts, usually one per line.

        Args:
            text: Tag body, may be None for self-closing tags

        Returns:
            Dictionary of trimmed keys to trimmed values
        """
        if not text:
            return {}

        return self.parse_args(text.split(self.PART_SEPARATOR))

    def parse_args(self, args: Iterable[str]) -> Dict[str, str]:
        """Parse ``key=value`` strings, splitting on the first ``=``.

        Parts without ``=`` or with an empty key are skipped. A repeated key
        keeps its first value.
        """
        params: Dict[str, str] = {}

        for arg in args:
            if self.KEY_VALUE_SEPARATOR not in arg:
                continue

            key, value = arg.split(self.KEY_VALUE_SEPARATOR, 1)
            key = key.strip()

            if not key or key in params:
                continue

            params[key] = value.strip()

        return params

    def expand_values(self, params: Mapping[str, str], expand: Optional[Expander] = None) -> Dict[str, str]:
        """Expand every value with the host's wikitext expander."""
        if expand is None:
            return dict(params)

        return {key: expand(value).strip() for key, value in params.items()}

    def merge_tag_args(
        self,
        body: Mapping[str, str],
        attributes: Mapping[str, str],
        canonical_key: Optional[KeyResolver] = None,
    ) -> Dict[str, str]:
        """Merge HTML-style tag attributes over values parsed from the body.

        An attribute wins over a body value naming the same attribute, also
        when the two use different spellings (``og:description`` and
        ``description``) and ``canonical_key`` resolves both to one name.

        Returns:
            Attributes first, then the body values they do not override
        """
        resolve = canonical_key or (lambda key: key)

        merged = dict(attributes)
        overridden = {resolve(key) for key in attributes} - {None}

        for key, value in body.items():
            if key in merged or resolve(key) in overridden:
                continue
            merged[key] = value

        return merged
