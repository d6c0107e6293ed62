"""Read the layered ``helloworld`` configuration.

Layers, lowest precedence first: bundled ``defaultconfig.toml``, app, host,
user, ``.env``, then environment variables.
Results are memoised per ``(profile, start_dir)`` for the life of the process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from helloworld import __init__conf__

_CACHE_SIZE = 4


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe as a directory component.

    Examples:
        >>> validate_profile("production")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Location of the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


class _CachedLoader:
    """Callable front for :func:`_read_layers` that validates, then memoises."""

    def __init__(self) -> None:
        self._read = lru_cache(maxsize=_CACHE_SIZE)(_read_layers)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration, optionally under ``profile/<name>/``.

        Example:
            >>> get_config().get("greeter.default_name")
            'World'
        """
        if profile is not None:
            validate_profile(profile)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget cached reads so the next call goes back to disk."""
        self._read.cache_clear()


get_config = _CachedLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
