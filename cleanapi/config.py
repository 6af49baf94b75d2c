"""Application configuration loaded from the environment."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Union

from dotenv import load_dotenv
from dotenv.parser import parse_stream

_INTEGER = re.compile(r"[+-]?[0-9]+")


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded."""


@dataclass
class AppConfig:
    """All configurable parameters of the application."""

    env: str = "dev"
    port: str = "8080"
    database_url: str = ""
    redis_url: str = ""
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""

    def is_prod(self) -> bool:
        """Return True when running in the production environment."""
        return self.env == "prod"


def load_env_file(path: Union[str, os.PathLike]) -> None:
    """Load variables from *path* into the environment, overriding existing ones.

    A missing file is ignored; any other failure raises ConfigError.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise ConfigError(f"stat {path}: {exc}") from exc

    try:
        with open(path, encoding="utf-8") as stream:
            bindings = list(parse_stream(stream))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"load {path}: {exc}") from exc

    for number, binding in enumerate(bindings, start=1):
        if binding.error:
            line = binding.original.string.strip()
            raise ConfigError(f"load {path}: invalid entry {number}: {line!r}")

    load_dotenv(path, override=True)


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"parsing {text!r}: invalid syntax")
    return int(text)


def load_config() -> AppConfig:
    """Read the configuration from the environment and a local .env file."""
    try:
        load_env_file(".env")
    except ConfigError:
        pass

    database_url = os.getenv("DATABASE_URL", "")
    if not database_url:
        raise ConfigError("DATABASE_URL is required")

    smtp_port_text = os.getenv("SMTP_PORT", "")
    if smtp_port_text:
        try:
            smtp_port = _parse_int(smtp_port_text)
        except ValueError as exc:
            raise ConfigError(f"invalid SMTP_PORT: {exc}") from exc
    else:
        smtp_port = 587

    return AppConfig(
        env=os.getenv("APP_ENV") or "dev",
        port=os.getenv("PORT") or "8080",
        database_url=database_url,
        redis_url=os.getenv("REDIS_URL", ""),
        smtp_host=os.getenv("SMTP_HOST", ""),
        smtp_port=smtp_port,
        smtp_user=os.getenv("SMTP_USER", ""),
        smtp_password=os.getenv("SMTP_PASSWORD", ""),
    )