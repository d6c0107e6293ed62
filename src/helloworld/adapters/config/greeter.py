"""Typed view of the ``[greeter]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from helloworld.domain.behaviors import DEFAULT_NAME


class GreeterConfigModel(BaseModel):
    """Pydantic model for [greeter] config section validation.

    Example:
        >>> GreeterConfigModel().default_name
        'World'
        >>> GreeterConfigModel(default_name=42).default_name
        '42'
        >>> GreeterConfigModel(default_name="  Ada ").default_name
        'Ada'
    """

    default_name: str = DEFAULT_NAME

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    @field_validator("default_name")
    @classmethod
    def _reject_blank_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("default_name must not be empty")
        return stripped


def load_greeter_config(config: Config) -> GreeterConfigModel:
    """Parse the ``[greeter]`` section, falling back to defaults when absent.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.

    Example:
        >>> load_greeter_config(Config({}, {})).default_name
        'World'
    """
    raw: object = config.get("greeter", default={})
    return GreeterConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "GreeterConfigModel",
    "load_greeter_config",
]
