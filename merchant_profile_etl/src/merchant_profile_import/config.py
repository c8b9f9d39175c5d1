"""
Configuration helpers.

Uses environment variables:
  PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD
  MERCHANT_GLOSSARY_KEY_PREFIX, MERCHANT_URL_ATTRIBUTE
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_GLOSSARY_KEY_PREFIX, URL

load_dotenv()


@dataclass
class DbConfig:
    host: str
    port: int
    database: str
    user: str
    password: str

    @classmethod
    def from_env(cls) -> "DbConfig":
        required = {
            "host": os.getenv("PGHOST"),
            "port": os.getenv("PGPORT"),
            "database": os.getenv("PGDATABASE"),
            "user": os.getenv("PGUSER"),
            "password": os.getenv("PGPASSWORD"),
        }
        missing = [key for key, value in required.items() if value is None]
        if missing:
            raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

        try:
            required["port"] = int(required["port"])
        except ValueError:
            raise ValueError("PGPORT must be an integer")

        return cls(
            host=required["host"],
            port=required["port"],
            database=required["database"],
            user=required["user"],
            password=required["password"],
        )

    @property
    def url(self) -> str:
        return f"postgresql+psycopg2://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class ImportConfig:
    glossary_key_prefix: str = DEFAULT_GLOSSARY_KEY_PREFIX
    url_attribute: str = URL

    @classmethod
    def from_env(cls) -> "ImportConfig":
        prefix = os.getenv("MERCHANT_GLOSSARY_KEY_PREFIX", DEFAULT_GLOSSARY_KEY_PREFIX).strip()
        if not prefix:
            raise ValueError("MERCHANT_GLOSSARY_KEY_PREFIX must not be blank")
        url_attribute = os.getenv("MERCHANT_URL_ATTRIBUTE", URL).strip() or URL
        return cls(glossary_key_prefix=prefix, url_attribute=url_attribute)


@dataclass
class Settings:
    db: DbConfig
    importer: ImportConfig

    @classmethod
    def load(cls) -> "Settings":
        return cls(db=DbConfig.from_env(), importer=ImportConfig.from_env())


__all__ = ["DbConfig", "ImportConfig", "Settings"]
