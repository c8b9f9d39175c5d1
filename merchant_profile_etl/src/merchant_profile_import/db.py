"""
Database helpers: create the engine, optionally create the database, and create
the import tables.
"""

import logging

import psycopg2
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from .config import DbConfig
from .models import Base

logger = logging.getLogger(__name__)


def create_database_if_missing(cfg: DbConfig) -> None:
    try:
        conn = psycopg2.connect(
            dbname="postgres",
            user=cfg.user,
            password=cfg.password,
            host=cfg.host,
            port=cfg.port,
        )
        conn.autocommit = True
        cur = conn.cursor()
        cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (cfg.database,))
        if not cur.fetchone():
            logger.info("Creating database %s", cfg.database)
            cur.execute(f'CREATE DATABASE "{cfg.database}"')
        cur.close()
        conn.close()
    except psycopg2.Error as exc:
        logger.warning("Could not verify/create database: %s", exc)


def get_engine(cfg: DbConfig) -> Engine:
    return create_engine(cfg.url)


def create_schema(engine: Engine) -> None:
    logger.info("Ensuring tables: %s", ", ".join(sorted(Base.metadata.tables)))
    Base.metadata.create_all(engine)


__all__ = ["create_database_if_missing", "get_engine", "create_schema"]
