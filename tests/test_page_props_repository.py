"""Tests for the page props repositories."""
import pytest
from sqlalchemy.exc import OperationalError

from wikiseo.domain.errors import StorageReadError, StorageWriteError
from wikiseo.infrastructure.persistence import models
from wikiseo.infrastructure.persistence.repositories.in_memory_page_props_repository import (
    InMemoryPagePropsRepository,
)


@pytest.mark.integration
class TestSQLAlchemyPagePropsRepository:
    """Test page props stored in the database."""

    def test_get_missing_returns_none(self, sql_store):
        assert sql_store.get(1, "WikiSEO") is None

    def test_set_and_get(self, sql_store, test_db_session):
        sql_store.set(1, "WikiSEO", '{"title": "Föö"}')

        assert sql_store.get(1, "WikiSEO") == '{"title": "Föö"}'
        row = test_db_session.get(models.PageProp, (1, "WikiSEO"))
        assert row.pp_value == '{"title": "Föö"}'.encode("utf-8")

    def test_set_overwrites(self, sql_store, test_db_session):
        sql_store.set(1, "WikiSEO", "first")
        sql_store.set(1, "WikiSEO", "second")

        assert sql_store.get(1, "WikiSEO") == "second"
        assert test_db_session.query(models.PageProp).count() == 1

    def test_props_are_scoped_by_page_and_name(self, sql_store):
        sql_store.set(1, "WikiSEO", "one")
        sql_store.set(2, "WikiSEO", "two")
        sql_store.set(1, "displaytitle", "other")

        assert sql_store.get(1, "WikiSEO") == "one"
        assert sql_store.get(2, "WikiSEO") == "two"
        assert sql_store.get(1, "displaytitle") == "other"

    def test_delete(self, sql_store):
        sql_store.set(1, "WikiSEO", "value")

        assert sql_store.delete(1, "WikiSEO") is True
        assert sql_store.get(1, "WikiSEO") is None
        assert sql_store.delete(1, "WikiSEO") is False

    def test_read_failure_is_wrapped(self, sql_store, monkeypatch):
        def broken_get(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("no such table"))

        monkeypatch.setattr(sql_store.session, "get", broken_get)

        with pytest.raises(StorageReadError):
            sql_store.get(1, "WikiSEO")

    def test_undecodable_value_is_a_read_failure(self, sql_store, test_db_session):
        test_db_session.add(models.PageProp(pp_page=42, pp_propname="WikiSEO", pp_value=b"\xff\xfe{"))
        test_db_session.commit()

        with pytest.raises(StorageReadError):
            sql_store.get(42, "WikiSEO")

    def test_write_failure_is_wrapped_and_rolled_back(self, sql_store, monkeypatch):
        def broken_commit():
            raise OperationalError("INSERT", {}, Exception("database is locked"))

        monkeypatch.setattr(sql_store.session, "commit", broken_commit)

        with pytest.raises(StorageWriteError):
            sql_store.set(1, "WikiSEO", "value")

        monkeypatch.undo()
        assert sql_store.get(1, "WikiSEO") is None


@pytest.mark.unit
class TestInMemoryPagePropsRepository:
    def test_set_get_delete(self):
        repo = InMemoryPagePropsRepository()

        assert repo.get(1, "WikiSEO") is None

        repo.set(1, "WikiSEO", "value")
        assert repo.get(1, "WikiSEO") == "value"
        assert repo.count() == 1

        assert repo.delete(1, "WikiSEO") is True
        assert repo.delete(1, "WikiSEO") is False
        assert repo.count() == 0
