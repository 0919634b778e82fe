"""
Tests for the database connector
"""

import logging

import pytest
from sqlalchemy import inspect

import database
from config import Env
from database import connect_db


class TestConnectDB:

    def test_connects_and_creates_tables(self, tmp_path, caplog):
        url = f"sqlite:///{tmp_path / 'chat.db'}"

        with caplog.at_level(logging.INFO, logger="database"):
            engine = connect_db(Env(DATABASE_URL=url))

        assert "users" in inspect(engine).get_table_names()
        assert database.SessionLocal.kw["bind"] is engine
        assert "Database connected" in caplog.text
        engine.dispose()

    def test_missing_uri_exits(self, caplog):
        with pytest.raises(SystemExit) as excinfo:
            connect_db(Env(DATABASE_URL=None))

        assert excinfo.value.code == 1
        assert "DATABASE_URL is not set" in caplog.text

    def test_unusable_uri_exits(self, caplog):
        with pytest.raises(SystemExit) as excinfo:
            connect_db(Env(DATABASE_URL="nosuchdialect://localhost/chat"))

        assert excinfo.value.code == 1
        assert "Error connecting to the database" in caplog.text

    def test_unreachable_database_exits(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing' / 'chat.db'}"

        with pytest.raises(SystemExit) as excinfo:
            connect_db(Env(DATABASE_URL=url))

        assert excinfo.value.code == 1
