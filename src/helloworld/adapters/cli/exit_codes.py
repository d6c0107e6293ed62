"""Exit codes for CLI error paths.

``hello`` and ``world`` report every failure as ``GENERAL_ERROR`` so shell
callers only need to distinguish zero from non-zero. The remaining codes
follow errno and sysexits.h for the configuration commands.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised through ``SystemExit`` or click exceptions.

    * 0: success
    * 1: invalid argument, failed self-check, or unexpected error
    * 22: EINVAL, unknown configuration section
    * 78: EX_CONFIG (sysexits.h), invalid configuration values

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
