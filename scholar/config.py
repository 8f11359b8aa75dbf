"""
Runtime settings for the Scholar registry.

Settings come from a plain mapping or a JSON file, the same shape the
command line accepts through ``--config``:

    {
        "instructor_edit_policy": "owner_only",
        "log_level": "INFO",
        "seed_sample_data": true
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .core.enums import EditPolicy
from .core.exceptions import ConfigurationError


class Settings(BaseModel):
    """Validated settings."""

    instructor_edit_policy: EditPolicy = EditPolicy.OWNER_ONLY
    log_level: str = Field("INFO", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')
    seed_sample_data: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "Settings":
        try:
            return cls.model_validate(dict(data or {}))
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Settings":
        try:
            with open(path, 'r') as f:
                data: Dict[str, Any] = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must hold a JSON object")
        return cls.from_mapping(data)
