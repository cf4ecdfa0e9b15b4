"""Repository interfaces."""
from wikiseo.domain.repositories.page_props_repository import PagePropsRepository

__all__ = [
    "PagePropsRepository",
]
