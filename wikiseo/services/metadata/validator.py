"""Validator that turns raw SEO attributes into canonical metadata."""
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from markupsafe import Markup

from wikiseo.services.metadata.constants import METADATA_CONSTANTS

logger = logging.getLogger(__name__)

NormalizedValue = Union[str, List[str]]


class Validator:
    """Validates and normalizes raw metadata attributes.

    The validator never raises on bad input. Unknown keys are dropped,
    malformed values are coerced where possible and dropped otherwise, so a
    failed validation shows up as an absent key in the result.

    When several spellings of the same attribute are given (for example
    ``description`` and ``og:description``), the first occurrence in input
    order that survives cleaning wins.
    """

    def __init__(self):
        self.constants = METADATA_CONSTANTS

    def validate(self, raw: Optional[Mapping[str, Any]]) -> Dict[str, NormalizedValue]:
        """Validate a raw attribute mapping.

        Args:
            raw: Mapping of attribute name to value, as given by the author

        Returns:
            Dictionary of canonical attribute name to normalized value.
            Empty and blank values are never present.
        """
        result: Dict[str, NormalizedValue] = {}

        if not raw:
            return result

        for raw_key, raw_value in raw.items():
            key = self.canonical_key(raw_key)

            if key is None:
                logger.debug(f"Ignoring unknown metadata attribute '{raw_key}'")
                continue

            if key in result:
                logger.debug(f"Ignoring '{raw_key}', '{key}' was already given")
                continue

            value = self.normalize_value(key, raw_value)

            if value is None:
                logger.debug(f"Dropping invalid value for '{raw_key}'")
                continue

            result[key] = value

        return result

    # Name used by the wiki extension
    validate_params = validate

    def canonical_key(self, raw_key: Any) -> Optional[str]:
        """Map a raw attribute name to its canonical name.

        Returns:
            Canonical name, or None if the key is not a known attribute
        """
        if not isinstance(raw_key, str):
            return None

        key = raw_key.strip().lower()
        key = self.constants.ALIASES.get(key, key)

        if key not in self.constants.VALID_PARAMS:
            return None

        return key

    def normalize_value(self, key: str, value: Any) -> Optional[NormalizedValue]:
        """Normalize a single value for a canonical key.

        Returns:
            The normalized value, or None if it must be dropped
        """
        if isinstance(value, (list, tuple)):
            return self._normalize_list(key, value)

        text = self._to_text(value, keep_whitespace=key == "title_separator")
        if text is None:
            return None

        return self._apply_rules(key, text)

    def _normalize_list(self, key: str, values) -> Optional[NormalizedValue]:
        keep_whitespace = key == "title_separator"
        items = []
        for item in values:
            text = self._to_text(item, keep_whitespace=keep_whitespace)
            if text is not None:
                items.append(text)

        if not items:
            return None

        if key in self.constants.REPEATABLE_PARAMS:
            return items

        if key in self.constants.DELIMITED_PARAMS:
            return self.constants.KEYWORD_JOINER.join(items)

        # Scalar attribute given several times: first usable value wins
        for item in items:
            normalized = self._apply_rules(key, item)
            if normalized is not None:
                return normalized

        return None

    def _to_text(self, value: Any, keep_whitespace: bool = False) -> Optional[str]:
        """Coerce a raw value to a non-blank string."""
        # bool is an int subclass but never a meaningful attribute value
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            value = str(value)

        if not isinstance(value, str):
            return None

        if not value.strip():
            return None

        return value if keep_whitespace else value.strip()

    def _apply_rules(self, key: str, text: str) -> Optional[str]:
        """Apply per-attribute rules to an already trimmed string."""
        if key == "title_separator":
            decoded = Markup(text).unescape()
            return decoded if decoded.strip() else None

        if key in self.constants.LOWERCASE_PARAMS:
            text = text.lower()

        if key == "title_mode" and text not in self.constants.VALID_TITLE_MODES:
            return None

        if key in self.constants.INTEGER_PARAMS:
            return self._positive_int(text)

        return text

    def _positive_int(self, text: str) -> Optional[str]:
        try:
            number = int(text)
        except ValueError:
            return None

        if number <= 0:
            return None

        return str(number)
