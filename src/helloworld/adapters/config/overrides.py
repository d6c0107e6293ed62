"""``--set SECTION.KEY=VALUE`` support for the root command.

Each value is read as JSON when possible (``42``, ``true``, ``null``,
``["a"]``) and otherwise kept as the literal text, so
``--set greeter.default_name=Ada`` needs no quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Anything :func:`coerce_value` may return."""

_Tree = dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` entry after parsing."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def _invalid(raw: str, problem: str) -> ValueError:
    return ValueError(f"Invalid override {raw!r}: {problem}")


def parse_override(raw: str) -> ConfigOverride:
    """Turn ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Only the first ``=`` separates path from value.

    Examples:
        >>> parse_override("greeter.default_name=Ada")
        ConfigOverride(section='greeter', key_path=('default_name',), value='Ada')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, separator, text = raw.partition("=")
    if not separator:
        raise _invalid(raw, "must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise _invalid(raw, "key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise _invalid(raw, "section name is empty")

    keys = tuple(rest.split("."))
    if "" in keys:
        raise _invalid(raw, "key path contains empty component")

    return ConfigOverride(section=section, key_path=keys, value=coerce_value(text))


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as JSON, or return it unchanged if it is not JSON.

    Examples:
        >>> [coerce_value(text) for text in ("true", "42", "null", "Ada", "")]
        [True, 42, None, 'Ada', '']
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _nest_override(target: dict[str, _Tree], override: ConfigOverride) -> None:
    """Place *override* inside *target*, creating intermediate tables.

    A scalar already sitting where a table is needed raises ``TypeError``.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="s", key_path=("x", "y"), value=3))
        >>> tree
        {'s': {'x': {'y': 3}}}
    """
    *parents, leaf = override.key_path
    table: _Tree = target.setdefault(override.section, {})
    for key in parents:
        child = table.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        table = cast(_Tree, child)
    table[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` entry merged in, last one winning.

    With no overrides the very same object comes back.

    Examples:
        >>> base = Config({"greeter": {"default_name": "World"}}, {})
        >>> apply_overrides(base, ("greeter.default_name=Ada",))["greeter"]["default_name"]
        'Ada'
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, _Tree] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
