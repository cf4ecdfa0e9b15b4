"""Tests for the tag and parser-function input adapters."""
import pytest
from wikiseo.services.metadata.tag_parser import TagParser
from wikiseo.services.metadata.validator import Validator


@pytest.fixture
def parser():
    return TagParser()


class TestParseText:
    """Test parsing of <seo> tag bodies."""

    def test_parse_multiline_body(self, parser):
        text = """
        |title=Example Title
        |keywords=one, two
        |description = An example =)
        """
        assert parser.parse_text(text) == {
            "title": "Example Title",
            "keywords": "one, two",
            "description": "An example =)",
        }

    def test_parse_empty_body(self, parser):
        assert parser.parse_text("") == {}
        assert parser.parse_text(None) == {}

    def test_parts_without_equals_are_skipped(self, parser):
        assert parser.parse_text("|title=Foo|garbage|=no key") == {"title": "Foo"}


class TestParseArgs:
    """Test parsing of parser-function arguments."""

    def test_split_on_first_equals(self, parser):
        result = parser.parse_args(["title=a=b", " description = text "])
        assert result == {"title": "a=b", "description": "text"}

    def test_repeated_key_keeps_first_value(self, parser):
        assert parser.parse_args(["title=One", "title=Two"]) == {"title": "One"}

    def test_empty_value_is_kept_for_validator(self, parser):
        assert parser.parse_args(["title="]) == {"title": ""}


class TestMergeAndExpand:
    """Test merging tag attributes and wikitext expansion."""

    def test_tag_attributes_override_body(self, parser):
        body = {"title": "Body", "keywords": "a"}
        merged = parser.merge_tag_args(body, {"title": "Attribute"})
        assert merged == {"title": "Attribute", "keywords": "a"}

    def test_tag_attributes_override_body_aliases(self, parser):
        body = {"description": "Body", "keywords": "a", "colour": "blue"}
        merged = parser.merge_tag_args(
            body,
            {"og:description": "Attribute", "size": "big"},
            canonical_key=Validator().canonical_key,
        )
        assert merged == {"og:description": "Attribute", "size": "big", "keywords": "a", "colour": "blue"}
        assert list(merged)[:2] == ["og:description", "size"]

    def test_expand_values(self, parser):
        expanded = parser.expand_values({"title": "{{PAGENAME}}"}, lambda text: text.replace("{{PAGENAME}}", " Foo "))
        assert expanded == {"title": "Foo"}

    def test_expand_without_expander_copies(self, parser):
        params = {"title": "Foo"}
        expanded = parser.expand_values(params)
        assert expanded == params
        assert expanded is not params
