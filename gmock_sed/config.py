"""
Settings for the gmock-sed command line, read from an optional TOML file.

Example ``.gmock-sed.toml``::

    max_depth = 10
    multi_line = true
    add_override = true
    extensions = ["cpp", "h"]
"""
from pathlib import Path
from typing import List, Optional

import toml
from pydantic import BaseModel, Field

DEFAULT_CONFIG = Path('.gmock-sed.toml')

CPP_SOURCE_EXT = ['cpp', 'cc', 'C', 'cxx', 'c++']
CPP_HEADER_EXT = ['h', 'hh', 'H', 'hxx', 'hpp', 'h++']


class Settings(BaseModel):
    extensions: List[str] = Field(default_factory=lambda: CPP_SOURCE_EXT + CPP_HEADER_EXT)
    max_depth: int = Field(default=50, ge=0)
    multi_line: bool = False
    add_override: bool = False
    strict_arity: bool = False
    jobs: int = Field(default=1, ge=1)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from *path*, or from .gmock-sed.toml when it exists.

    An explicitly given file that is missing is an error; a missing default
    file just yields the defaults.
    """
    if path is None:
        if not DEFAULT_CONFIG.is_file():
            return Settings()
        path = DEFAULT_CONFIG
    if not path.is_file():
        raise ValueError(f"Config file not found: {path}")
    try:
        data = toml.loads(path.read_text(encoding='utf-8'))
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e
    return Settings(**data)
