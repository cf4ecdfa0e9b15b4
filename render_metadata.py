#!/usr/bin/env python3
"""Render the SEO head tags for a page from attributes on the command line.

Examples:
    python render_metadata.py --title "Main Page" title=Welcome keywords="wiki, seo"
    python render_metadata.py --attributes attrs.json --page-id 1 --database-url sqlite:///wiki.db
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from wikiseo.config import get_settings
from wikiseo.domain.entities.page import Page
from wikiseo.infrastructure.output.output_page import OutputPage
from wikiseo.infrastructure.persistence.db import get_engine, get_session_factory, init_db
from wikiseo.infrastructure.persistence.repositories.in_memory_page_props_repository import (
    InMemoryPagePropsRepository,
)
from wikiseo.infrastructure.persistence.repositories.sqlalchemy_page_props_repository import (
    SQLAlchemyPagePropsRepository,
)
from wikiseo.services.wiki_seo import WikiSEO

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Render SEO metadata tags for a page")
    parser.add_argument("params", nargs="*", help="Attributes as key=value")
    parser.add_argument("--attributes", type=Path, help="JSON file with an attribute object")
    parser.add_argument("--title", default="Main Page", help="Display title of the page")
    parser.add_argument("--url", default="//localhost/wiki/Main_Page", help="Full URL of the page")
    parser.add_argument("--protocol", default="https", choices=["http", "https"])
    parser.add_argument("--page-id", type=int, default=None, help="Article ID, enables persistence")
    parser.add_argument("--database-url", default=None, help="Store page props in this database")
    parser.add_argument("--replay", action="store_true",
                        help="Emit tags from stored metadata instead of new attributes")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)

    store = None
    if args.database_url:
        engine = get_engine(args.database_url)
        init_db(engine)
        store = SQLAlchemyPagePropsRepository(get_session_factory(engine)())

    seo = WikiSEO(settings=get_settings(), store=store, cache=InMemoryPagePropsRepository())
    page = Page(id=args.page_id, title=args.title, full_url=args.url, protocol=args.protocol)
    out = OutputPage()

    if args.replay:
        result = seo.add_metadata_to_page(page, out)
    elif args.attributes:
        with open(args.attributes, "r", encoding="utf-8") as f:
            raw = json.load(f)
        result = seo.process(raw, page, out)
    else:
        result = seo.from_parser_function(args.params, page, out)

    if not result.ok:
        for error in result.errors:
            logger.error(error)

    print(out.render_head())
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
