"""Exit code contract and the shared command error handling."""

from __future__ import annotations

import click
import pytest

from helloworld.adapters.cli.commands._common import (
    StrictCommand,
    execute_with_error_handling,
    last_positional,
    raise_invalid_argument,
)
from helloworld.adapters.cli.exit_codes import ExitCode
from helloworld.domain.errors import InternalConsistencyError, InvalidNameError


@pytest.fixture
def command_context() -> click.Context:
    """Provide a bare context for a StrictCommand named 'probe'."""
    return click.Context(StrictCommand("probe"))


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "value"),
    [
        (ExitCode.SUCCESS, 0),
        (ExitCode.GENERAL_ERROR, 1),
        (ExitCode.INVALID_ARGUMENT, 22),
        (ExitCode.CONFIG_ERROR, 78),
    ],
)
def test_exit_code_values(member: ExitCode, value: int) -> None:
    """Exit codes are stable integers."""
    assert member == value


@pytest.mark.os_agnostic
def test_strict_command_turns_unknown_option_into_exit_one(command_context: click.Context) -> None:
    """Parsing errors carry exit code 1 instead of Click's 2."""
    command = StrictCommand("probe")

    with pytest.raises(click.UsageError) as exc:
        command.parse_args(command_context, ["--bogus"])

    assert exc.value.exit_code == ExitCode.GENERAL_ERROR


@pytest.mark.os_agnostic
def test_raise_invalid_argument_carries_message_and_exit_one(command_context: click.Context) -> None:
    """The raised UsageError keeps the message and context."""
    with pytest.raises(click.UsageError, match="Name cannot be empty") as exc:
        raise_invalid_argument(command_context, "Name cannot be empty")

    assert exc.value.exit_code == 1
    assert exc.value.ctx is command_context


@pytest.mark.os_agnostic
def test_execute_returns_operation_result(command_context: click.Context) -> None:
    """Successful operations pass their value through."""
    assert execute_with_error_handling(command_context, lambda: "Hello, World!", command="hello", verbose=False) == (
        "Hello, World!"
    )


@pytest.mark.os_agnostic
def test_execute_maps_value_error_to_usage_error(command_context: click.Context) -> None:
    """Domain ValueErrors become usage errors with exit code 1."""

    def reject() -> str:
        raise InvalidNameError("Name cannot be null or empty")

    with pytest.raises(click.UsageError, match="Name cannot be null or empty") as exc:
        execute_with_error_handling(command_context, reject, command="hello", verbose=False)

    assert exc.value.exit_code == 1


@pytest.mark.os_agnostic
def test_execute_reports_internal_error(
    command_context: click.Context,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Consistency failures print 'Internal error' and exit 1."""

    def inconsistent() -> str:
        raise InternalConsistencyError("Generated world info is invalid")

    with pytest.raises(SystemExit) as exc:
        execute_with_error_handling(command_context, inconsistent, command="world", verbose=False)

    assert exc.value.code == 1
    assert "Internal error: Generated world info is invalid" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_execute_reports_unexpected_error(
    command_context: click.Context,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Anything else prints 'Unexpected error' and exits 1."""
    monkeypatch.delenv("DEVELOPMENT_MODE", raising=False)

    def explode() -> str:
        raise OSError("disk on fire")

    with pytest.raises(SystemExit) as exc:
        execute_with_error_handling(command_context, explode, command="hello", verbose=False)

    assert exc.value.code == 1
    assert "Unexpected error: disk on fire" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_execute_reraises_unexpected_error_in_development_mode(
    command_context: click.Context,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """DEVELOPMENT_MODE surfaces the original exception."""
    monkeypatch.setenv("DEVELOPMENT_MODE", "1")

    def explode() -> str:
        raise OSError("disk on fire")

    with pytest.raises(OSError, match="disk on fire"):
        execute_with_error_handling(command_context, explode, command="hello", verbose=False)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ((), None),
        (("Alice",), "Alice"),
        (("Alice", "Bob", "Carol"), "Carol"),
    ],
)
def test_last_positional(values: tuple[str, ...], expected: str | None) -> None:
    """The last value wins; no values gives None."""
    assert last_positional(values) == expected
