# brew_units/config.py

"""
Runtime configuration

Read from the process environment, with an optional .env file filling in
anything the environment leaves unset:

    BREW_UNITS_LOG_LEVEL       logging level for the brew_units loggers (INFO)
    BREW_UNITS_EXACT           Fraction arithmetic instead of float (true)
    BREW_UNITS_DEFAULT_FORMAT  pint default format spec (~P)
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, field_validator

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

ENV_PREFIX = "BREW_UNITS_"


class Settings(BaseModel):
    """brew_units settings"""
    log_level: str = "INFO"
    exact: bool = True
    default_format: str = Field(default="~P")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level


def load_settings(dotenv_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Build Settings from BREW_UNITS_* variables.

    The real environment wins over the .env file; the file is never written
    into os.environ.
    """
    path = dotenv_path if dotenv_path is not None else find_dotenv(usecwd=True)
    values = {k: v for k, v in dotenv_values(path).items() if v is not None} if path else {}
    values.update(os.environ)

    fields = {}
    for field_name in Settings.model_fields:
        key = ENV_PREFIX + field_name.upper()
        if key in values:
            fields[field_name] = values[key]

    return Settings(**fields)


def configure_logging(settings: Settings) -> None:
    """Apply the configured level; add a handler only if nobody has."""
    logging.getLogger("brew_units").setLevel(settings.log_level)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
