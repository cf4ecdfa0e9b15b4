"""SQLAlchemy implementation of PagePropsRepository."""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wikiseo.domain.errors import StorageReadError, StorageWriteError
from wikiseo.domain.repositories.page_props_repository import PagePropsRepository
from wikiseo.infrastructure.persistence import models

logger = logging.getLogger(__name__)


class SQLAlchemyPagePropsRepository(PagePropsRepository):
    """Page property repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, page_id: int, name: str) -> Optional[str]:
        try:
            row = self.session.get(models.PageProp, (page_id, name))
            if row is None:
                return None
            return row.pp_value.decode("utf-8")
        except (SQLAlchemyError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read page prop '{name}' for page {page_id}: {e}")
            raise StorageReadError(f"Cannot read page prop '{name}': {e}") from e

    def set(self, page_id: int, name: str, value: str) -> None:
        try:
            row = self.session.get(models.PageProp, (page_id, name))
            if row is None:
                row = models.PageProp(pp_page=page_id, pp_propname=name)
                self.session.add(row)
            row.pp_value = value.encode("utf-8")
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to store page prop '{name}' for page {page_id}: {e}")
            raise StorageWriteError(f"Cannot write page prop '{name}': {e}") from e

    def delete(self, page_id: int, name: str) -> bool:
        try:
            row = self.session.get(models.PageProp, (page_id, name))
            if row is None:
                return False
            self.session.delete(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageWriteError(f"Cannot delete page prop '{name}': {e}") from e
        return True
