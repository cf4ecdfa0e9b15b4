"""SQLAlchemy models matching the wiki's page_props table."""
from sqlalchemy import (
    Column,
    Integer,
    LargeBinary,
    String,
)

from wikiseo.infrastructure.persistence.db import Base


class PageProp(Base):
    __tablename__ = "page_props"

    pp_page = Column(Integer, primary_key=True, autoincrement=False)
    pp_propname = Column(String(60), primary_key=True)
    pp_value = Column(LargeBinary, nullable=False)
    pp_sortkey = Column(Integer, nullable=True)
