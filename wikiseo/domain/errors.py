from wikiseo.constants import MESSAGE_INVALID_GENERATOR


class WikiSEOError(Exception):
    """Base error for the metadata pipeline."""


class MissingTitleContextError(WikiSEOError):
    """The page has no identity, so stored metadata cannot be looked up."""


class InvalidGeneratorError(WikiSEOError):
    """A configured generator identifier is not registered."""

    def __init__(self, identifier: str):
        super().__init__(MESSAGE_INVALID_GENERATOR.format(name=identifier))
        self.identifier = identifier


class GeneratorStateError(WikiSEOError):
    """A generator was initialized or emitted out of order or twice."""


class StorageReadError(WikiSEOError):
    pass


class StorageWriteError(WikiSEOError):
    pass
