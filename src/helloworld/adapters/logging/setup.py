"""Start lib_log_rich from the ``[lib_log_rich]`` configuration section.

The root command calls :func:`init_logging` after configuration (including
``--set``) is resolved, so ``helloworld`` and ``python -m helloworld`` log
identically. :func:`helloworld.adapters.cli.main.main` shuts the runtime down.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from helloworld import __init__conf__

_MODELLED_KEYS = frozenset({"service", "environment"})


class LoggingConfigModel(BaseModel):
    """The two keys we default ourselves; anything else is passed through.

    Example:
        >>> LoggingConfigModel(console_level="DEBUG").model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: Any = config.get("lib_log_rich", default={})
    settings = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    passthrough = settings.model_dump(exclude=set(_MODELLED_KEYS), exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Bring up the logging runtime once per process.

    ``.env`` files are honoured for ``LOG_*`` variables, and records from the
    standard :mod:`logging` module are routed into lib_log_rich. A second
    call does nothing.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
