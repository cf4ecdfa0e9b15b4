"""WikiSEO pipeline: validate attributes, rewrite the title, run the generators.

One WikiSEO instance holds the collaborators (settings, stores, generator
registry). Every call processes one page and keeps its state in a
PipelineState value, so an instance can be reused across requests.
"""
import json
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from markupsafe import Markup

from wikiseo.config import Settings, get_settings
from wikiseo.constants import (
    ERROR_BOX_CLASS,
    MESSAGE_EMPTY_ATTRIBUTES,
    MESSAGE_GENERATOR_FAILED,
    MESSAGE_MISSING_PAGE_TITLE,
    MODE_PARSER,
    MODE_TAG,
    PAGE_PROP_NAME,
)
from wikiseo.domain.entities.page import Page
from wikiseo.domain.errors import (
    InvalidGeneratorError,
    MissingTitleContextError,
    StorageReadError,
    StorageWriteError,
)
from wikiseo.domain.output_sink import OutputSink
from wikiseo.domain.repositories.page_props_repository import PagePropsRepository
from wikiseo.services.generators.base import Generator
from wikiseo.services.generators.meta_tag import MetaTag
from wikiseo.services.generators.registry import GeneratorRegistry, default_registry
from wikiseo.services.metadata.models import PipelineState, PipelineStatus, RenderResult, TitlePolicy
from wikiseo.services.metadata.tag_parser import Expander, TagParser
from wikiseo.services.metadata.validator import Validator

logger = logging.getLogger(__name__)


class WikiSEO:
    """Orchestrates the metadata pipeline for a page.

    Fresh input (tag or parser function) runs
    validate -> title -> dispatch -> persist -> finalize.
    Render-time replay reads the persisted metadata and runs
    title -> dispatch -> finalize.

    No exception escapes into the caller: failures become messages in the
    returned RenderResult, rendered as one error block.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[PagePropsRepository] = None,
        cache: Optional[PagePropsRepository] = None,
        registry: Optional[GeneratorRegistry] = None,
    ):
        """Initialize the pipeline.

        Args:
            settings: Pipeline settings. Defaults to the cached global settings.
            store: Persistent page property store (the page_props table)
            cache: Output-page property cache, read when the store has nothing
            registry: Optional generators. Defaults to the built-in plugins.
        """
        self.settings = settings or get_settings()
        self.store = store
        self.cache = cache
        self.registry = registry or default_registry()
        self.validator = Validator()
        self.tag_parser = TagParser()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def from_tag(
        self,
        text: Optional[str],
        args: Optional[Mapping[str, str]],
        page: Page,
        out: OutputSink,
        expand: Optional[Expander] = None,
    ) -> RenderResult:
        """Process the body and attributes of an <seo> tag.

        Args:
            text: Tag body with ``|key=value`` parts
            args: HTML attributes of the tag, these override body values
            page: The page being rendered
            out: Output sink for title and tags
            expand: Host hook expanding wikitext in body values

        Returns:
            RenderResult whose html replaces the tag in the page
        """
        body = self.tag_parser.parse_text(text)
        body = self.tag_parser.expand_values(body, expand)
        raw = self.tag_parser.merge_tag_args(body, args or {}, canonical_key=self.validator.canonical_key)

        return self.process(raw, page, out, mode=MODE_TAG)

    def from_parser_function(
        self,
        args: Iterable[str],
        page: Page,
        out: OutputSink,
        expand: Optional[Expander] = None,
    ) -> RenderResult:
        """Process the positional ``key=value`` arguments of {{#seo:}}."""
        if expand is not None:
            args = [expand(arg).strip() for arg in args]

        raw = self.tag_parser.parse_args(args)

        return self.process(raw, page, out, mode=MODE_PARSER)

    def process(
        self,
        raw: Mapping[str, Any],
        page: Page,
        out: OutputSink,
        mode: str = MODE_PARSER,
    ) -> RenderResult:
        """Run the full pipeline on fresh raw attributes."""
        state = PipelineState(mode=mode, page=page)
        state = state.with_metadata(self.validator.validate(raw))

        if not state.metadata:
            logger.info(f"No valid metadata given via {mode} on page '{page.title}'")
            state = state.with_error(MESSAGE_EMPTY_ATTRIBUTES.get(mode, MESSAGE_EMPTY_ATTRIBUTES[MODE_PARSER]))
            return self._finalize(state)

        state = self._modify_page_title(state, out)
        state = self._dispatch(state, out)
        self._save_metadata_to_props(state)

        return self._finalize(state)

    def add_metadata_to_page(self, page: Page, out: OutputSink) -> RenderResult:
        """Emit tags from the metadata persisted for a page.

        Used when a page is rendered without running its <seo> tag, e.g.
        from the parser cache.
        """
        state = PipelineState(mode=MODE_PARSER, page=page)

        try:
            state = state.with_metadata(self.load_metadata(page))
        except MissingTitleContextError as e:
            logger.warning(f"Cannot load stored metadata: {e}")
            state = state.with_error(MESSAGE_MISSING_PAGE_TITLE)

        state = self._modify_page_title(state, out)
        state = self._dispatch(state, out)

        return self._finalize(state)

    # ------------------------------------------------------------------
    # Page props
    # ------------------------------------------------------------------

    def load_metadata(self, page: Page) -> dict:
        """Load and validate the metadata persisted for a page.

        The store is preferred, the cache is the fallback. A missing or
        unreadable property is treated as empty metadata.

        Raises:
            MissingTitleContextError: If the page has no ID
        """
        if not page.has_identity():
            raise MissingTitleContextError(f"Page '{page.title}' has no article ID")

        blob = self._read_prop(self.store, page.id)
        if blob is None:
            blob = self._read_prop(self.cache, page.id)

        return self.validator.validate(decode_metadata(blob))

    def _read_prop(self, repository: Optional[PagePropsRepository], page_id: int) -> Optional[str]:
        if repository is None:
            return None

        try:
            return repository.get(page_id, PAGE_PROP_NAME)
        except StorageReadError as e:
            logger.warning(f"Falling back after page prop read failure for page {page_id}: {e}")
            return None

    def _save_metadata_to_props(self, state: PipelineState) -> None:
        """Persist the metadata as JSON under the WikiSEO page property."""
        page = state.page
        if not page.has_identity():
            logger.warning(f"Not storing metadata for page '{page.title}' without article ID")
            return

        blob = encode_metadata(state.metadata)

        if self.cache is not None:
            self.cache.set(page.id, PAGE_PROP_NAME, blob)

        if self.store is None:
            return

        try:
            self.store.set(page.id, PAGE_PROP_NAME, blob)
            logger.info(f"✓ Stored metadata for page {page.id}")
        except StorageWriteError as e:
            logger.warning(f"Metadata for page {page.id} kept in cache only: {e}")

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _modify_page_title(self, state: PipelineState, out: OutputSink) -> PipelineState:
        """Set the page title according to title_mode and title_separator."""
        meta_title = state.metadata.get("title")
        if not meta_title:
            return state

        policy = TitlePolicy.from_metadata(
            state.metadata,
            default_mode=self.settings.DEFAULT_TITLE_MODE,
            default_separator=self.settings.DEFAULT_TITLE_SEPARATOR,
        )
        title = policy.apply(meta_title, state.page.title)
        out.set_title(title)

        return state.with_title(title)

    def _instantiate_generators(self, state: PipelineState) -> Tuple[List[Generator], PipelineState]:
        """Create the MetaTag generator followed by the configured ones."""
        generators: List[Generator] = [MetaTag(self.settings, state.page)]

        for identifier in self.settings.METADATA_GENERATORS:
            try:
                generators.append(self._create_generator(identifier, state.page))
            except InvalidGeneratorError as e:
                logger.warning(str(e))
                state = state.with_error(str(e))
            except Exception as e:
                logger.error(f"Cannot create metadata generator {identifier}: {e}", exc_info=True)
                state = state.with_error(MESSAGE_GENERATOR_FAILED.format(name=identifier, error=e))

        return generators, state

    def _create_generator(self, identifier: str, page: Page) -> Generator:
        factory = self.registry.resolve(identifier)
        if factory is None:
            raise InvalidGeneratorError(identifier)
        return factory(self.settings, page)

    def _dispatch(self, state: PipelineState, out: OutputSink) -> PipelineState:
        """Run every generator once, isolating failures."""
        generators, state = self._instantiate_generators(state)

        for generator in generators:
            try:
                generator.init(state.metadata, out)
                generator.emit()
            except Exception as e:
                # Generators may come from third parties
                logger.error(f"Metadata generator {generator.name} failed: {e}", exc_info=True)
                state = state.with_error(MESSAGE_GENERATOR_FAILED.format(name=generator.name, error=e))

        return state

    def _finalize(self, state: PipelineState) -> RenderResult:
        if state.errors:
            return RenderResult(
                status=PipelineStatus.ERROR,
                html=make_error_html(state.errors),
                metadata=dict(state.metadata),
                errors=state.errors,
                title=state.title,
            )

        return RenderResult(
            status=PipelineStatus.SUCCESS,
            metadata=dict(state.metadata),
            title=state.title,
        )


def make_error_html(errors: Iterable[str]) -> str:
    """Render messages as one error box, one message per line."""
    text = Markup("<br>").join(errors)
    return str(Markup('<div class="{}">{}</div>').format(ERROR_BOX_CLASS, text))


def encode_metadata(metadata: Mapping[str, Any]) -> str:
    return json.dumps(dict(metadata), ensure_ascii=False)


def decode_metadata(blob: Optional[str]) -> dict:
    """Decode a persisted metadata blob. Absent or corrupt blobs decode to {}."""
    if not blob:
        return {}

    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        logger.warning(f"Stored metadata is corrupted: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Stored metadata is not an object: {type(data).__name__}")
        return {}

    return data
