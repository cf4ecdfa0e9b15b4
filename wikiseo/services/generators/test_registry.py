"""Tests for the generator registry."""
import pytest
from wikiseo.services.generators.base import Generator
from wikiseo.services.generators.plugins.open_graph import OpenGraph
from wikiseo.services.generators.plugins.twitter import Twitter
from wikiseo.services.generators.registry import GeneratorRegistry, default_registry


class Dummy(Generator):
    identifier = "Dummy"

    def add_metadata(self) -> None:
        self.sink.add_meta_tag("dummy", "yes")


class TestGeneratorRegistry:
    def test_default_registry(self):
        registry = default_registry()

        assert registry.identifiers() == ["OpenGraph", "Twitter"]
        assert registry.resolve("OpenGraph") is OpenGraph
        assert registry.resolve("Twitter") is Twitter

    def test_lookup_is_case_insensitive(self):
        registry = default_registry()

        assert registry.resolve("opengraph") is OpenGraph
        assert registry.resolve(" TWITTER ") is Twitter

    def test_unknown_identifier_is_a_miss(self):
        registry = default_registry()

        assert registry.resolve("SchemaOrg") is None
        assert registry.resolve(None) is None
        assert "SchemaOrg" not in registry

    def test_register_third_party_generator(self):
        registry = GeneratorRegistry()
        registry.register(Dummy.identifier, Dummy)

        assert registry.resolve("dummy") is Dummy
        assert "Dummy" in registry

    def test_duplicate_registration_fails(self):
        registry = default_registry()

        with pytest.raises(ValueError, match="already registered"):
            registry.register("opengraph", Dummy)

    def test_empty_identifier_fails(self):
        with pytest.raises(ValueError):
            GeneratorRegistry().register("  ", Dummy)

    def test_default_registries_are_independent(self):
        first = default_registry()
        first.register(Dummy.identifier, Dummy)

        assert "Dummy" not in default_registry()
