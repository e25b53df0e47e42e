"""Config Report: resolves the Strapi database and server configs and prints them.

Invariants:
    - env(key, default) returns the environment value when set and non-empty,
      the default otherwise; values stay strings
    - No validation, transformation or persistence of the resolved values
"""

import os
from typing import Callable, Mapping

EnvLookup = Callable[[str, str], str]

DEFAULT_APP_KEYS = "toBeModified1,toBeModified2"


def make_env(environ: Mapping[str, str] | None = None) -> EnvLookup:
    """Build an ``env(key, default)`` provider over a mapping (os.environ by default)."""
    source = os.environ if environ is None else environ

    def env(key: str, default: str) -> str:
        return source.get(key) or default

    return env


def database_config(env: EnvLookup) -> dict:
    return {
        "connection": {
            "client": env("DATABASE_CLIENT", "sqlite"),
            "connection": {
                "filename": env("DATABASE_FILENAME", ".tmp/data.db"),
            },
            "useNullAsDefault": True,
        },
    }


def server_config(env: EnvLookup) -> dict:
    return {
        "host": env("HOST", "0.0.0.0"),
        "port": env("PORT", "1337"),
        "app": {"keys": env("APP_KEYS", DEFAULT_APP_KEYS).split(",")},
    }


def main(environ: Mapping[str, str] | None = None) -> None:
    env = make_env(environ)
    print("Database config:", database_config(env))
    print("Server config:", server_config(env))


if __name__ == "__main__":
    main()
