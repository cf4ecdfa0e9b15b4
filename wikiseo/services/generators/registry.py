"""Static registry mapping generator identifiers to factories."""
import logging
from typing import Dict, List, Optional

from wikiseo.services.generators.base import GeneratorFactory
from wikiseo.services.generators.plugins.open_graph import OpenGraph
from wikiseo.services.generators.plugins.twitter import Twitter

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Maps generator identifiers (as used in settings) to factories.

    Lookups are case-insensitive, so "OpenGraph" and "opengraph" resolve to
    the same generator. An unknown identifier is a lookup miss, not an error.
    """

    def __init__(self):
        self._factories: Dict[str, GeneratorFactory] = {}
        self._names: Dict[str, str] = {}

    def register(self, identifier: str, factory: GeneratorFactory) -> None:
        """Register a generator factory.

        Raises:
            ValueError: If the identifier is empty or already registered
        """
        if not identifier or not identifier.strip():
            raise ValueError("Generator identifier cannot be empty")

        key = identifier.strip().lower()
        if key in self._factories:
            raise ValueError(f"Generator '{identifier}' is already registered")

        self._factories[key] = factory
        self._names[key] = identifier.strip()
        logger.debug(f"Registered metadata generator '{identifier}'")

    def resolve(self, identifier: str) -> Optional[GeneratorFactory]:
        """Find the factory for an identifier, None if unknown."""
        if not isinstance(identifier, str):
            return None
        return self._factories.get(identifier.strip().lower())

    def __contains__(self, identifier: str) -> bool:
        return self.resolve(identifier) is not None

    def identifiers(self) -> List[str]:
        """Registered identifiers in registration order."""
        return list(self._names.values())


def default_registry() -> GeneratorRegistry:
    """Registry with the built-in optional generators."""
    registry = GeneratorRegistry()
    registry.register(OpenGraph.identifier, OpenGraph)
    registry.register(Twitter.identifier, Twitter)
    return registry
