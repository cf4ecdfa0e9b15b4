"""Metadata generators: the mandatory MetaTag generator and optional plugins."""
from wikiseo.services.generators.base import Generator, GeneratorFactory
from wikiseo.services.generators.meta_tag import MetaTag
from wikiseo.services.generators.plugins.open_graph import OpenGraph
from wikiseo.services.generators.plugins.twitter import Twitter
from wikiseo.services.generators.registry import GeneratorRegistry, default_registry

__all__ = [
    "Generator",
    "GeneratorFactory",
    "GeneratorRegistry",
    "MetaTag",
    "OpenGraph",
    "Twitter",
    "default_registry",
]
