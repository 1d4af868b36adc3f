"""Codec configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from grid_common.config.env import parse_int_env
from grid_common.errors import ConfigurationError, wrap_error

NANOID_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class SelectCodecConfig(BaseModel):
    """Settings for option id allocation."""

    option_id_length: int = Field(
        default=4, ge=1, description="Number of characters in a generated option id"
    )
    option_id_alphabet: str = Field(
        default=NANOID_ALPHABET,
        min_length=1,
        description="Characters used for generated option ids",
    )

    model_config = {"extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def _apply_env_fallbacks(cls, values: Any) -> Any:
        """Apply env vars as fallbacks for missing config values.

        Priority: config file > environment variables > defaults.
        """
        if isinstance(values, cls):
            return values
        if values is None:
            values = {}
        if not isinstance(values, dict):
            return values
        values = dict(values)

        if values.get("option_id_length") is None:
            env_length = parse_int_env(os.environ.get("GS_OPTION_ID_LENGTH"))
            if env_length is not None:
                values["option_id_length"] = env_length

        if not values.get("option_id_alphabet"):
            env_alphabet = os.environ.get("GS_OPTION_ID_ALPHABET")
            if env_alphabet:
                values["option_id_alphabet"] = env_alphabet

        return values

    @model_validator(mode="after")
    def _validate_separator_free(self) -> "SelectCodecConfig":
        if "," in self.option_id_alphabet:
            raise ValueError("option_id_alphabet must not contain the id separator ','")
        return self


def load_config_from_file(config_path: Path) -> SelectCodecConfig:
    """Load codec settings from a YAML file.

    Values under ``select`` override values under ``common``.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise wrap_error(
            ConfigurationError,
            f"Config file {config_path} is not valid YAML",
            context={"path": config_path},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping at the top level.",
            context={"path": config_path},
        )
    common = data.get("common", {}) or {}
    select_data = data.get("select", {}) or {}
    if not isinstance(common, dict) or not isinstance(select_data, dict):
        raise ConfigurationError(
            "Config sections 'common' and 'select' must be mappings.",
            context={"path": config_path},
        )
    try:
        return SelectCodecConfig(**{**common, **select_data})
    except ValidationError as exc:
        raise wrap_error(
            ConfigurationError,
            f"Invalid codec configuration in {config_path}",
            context={"path": config_path, "errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc


_CONFIG: SelectCodecConfig | None = None


def get_config() -> SelectCodecConfig:
    """Return the process-wide codec config, building it from env on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = SelectCodecConfig()
    return _CONFIG


def set_config(config: SelectCodecConfig | None) -> None:
    """Replace the process-wide codec config; None resets to env defaults."""
    global _CONFIG
    _CONFIG = config
