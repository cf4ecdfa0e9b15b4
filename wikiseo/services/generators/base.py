"""Generator interface - every metadata output format implements this."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

from markupsafe import Markup

from wikiseo.config import Settings
from wikiseo.domain.entities.page import Page
from wikiseo.domain.errors import GeneratorStateError
from wikiseo.domain.output_sink import OutputSink


class Generator(ABC):
    """Turns normalized metadata into one flavor of page metadata.

    Lifecycle: ``init`` binds the generator to one request's metadata and
    output sink, then ``emit`` writes the tags. Each is called exactly once
    per instance; calling them out of order or twice raises
    GeneratorStateError.

    Generators read only the metadata and the page, and write only through
    the sink, so they can run in any order without seeing each other.
    """

    #: Identifier used in the METADATA_GENERATORS setting
    identifier: str = ""

    def __init__(self, settings: Settings, page: Page):
        self.settings = settings
        self.page = page
        self.metadata: Mapping[str, Any] = {}
        self.sink: Optional[OutputSink] = None
        self._initialized = False
        self._emitted = False

    def init(self, metadata: Mapping[str, Any], sink: OutputSink) -> None:
        """Bind the generator to the request's metadata and output sink."""
        if self._initialized:
            raise GeneratorStateError(f"{self.name} was already initialized")

        self.metadata = metadata
        self.sink = sink
        self._initialized = True

    def emit(self) -> None:
        """Write the metadata to the sink."""
        if not self._initialized:
            raise GeneratorStateError(f"{self.name} must be initialized before emitting")
        if self._emitted:
            raise GeneratorStateError(f"{self.name} was already emitted")

        self._emitted = True
        self.add_metadata()

    @property
    def name(self) -> str:
        return self.identifier or type(self).__name__

    @abstractmethod
    def add_metadata(self) -> None:
        """Write this generator's tags to ``self.sink``."""
        pass

    def get(self, key: str) -> Optional[Any]:
        """Get a metadata value, None if absent."""
        return self.metadata.get(key)


# Factory signature the registry stores: (settings, page) -> Generator
GeneratorFactory = Callable[[Settings, Page], Generator]


def meta_property(prop: str, content: str) -> str:
    """Render ``<meta property="..." content="..."/>`` with escaped values."""
    return str(Markup('<meta property="{}" content="{}"/>').format(prop, content))
