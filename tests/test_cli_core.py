"""CLI stories: every invocation of ``hello`` and the wrapper around it."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from hello_buildinfo.adapters import cli as cli_mod
from hello_buildinfo.adapters.cli import ExitCode, cli
from hello_buildinfo.composition import AppServices, build_testing
from hello_buildinfo.domain.metadata import RuntimeInfo

TestingFactory = Callable[..., Callable[[], AppServices]]

GREETING = "Hello, world!\nUse 'hello version' to see version information\n"
HELP_BLOCK = (
    "Hello World Application\n"
    "Version: dev\n"
    "\n"
    "Usage:\n"
    "  hello              Show greeting\n"
    "  hello version      Show version information\n"
    "  hello help         Show this help\n"
)
STAMPED_BUILD = {"version": "v1.2.0", "build_time": "2024-05-01T12:00:00Z", "git_commit": "9f1c2ab"}


# ---------------------------------------------------------------------------
# Greeting
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_no_arguments_prints_the_greeting(cli_runner: CliRunner) -> None:
    """``hello`` prints the greeting with the usage hint and exits 0."""
    result = cli_runner.invoke(cli, [], obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout == GREETING


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "args",
    [
        ["world"],
        ["Version"],
        ["--bogus"],
        ["-x"],
        ["-hv"],
        ["--traceback"],
        ["hello", "version"],
        ["--"],
        ["--", "version"],
        ["--", "help"],
        ["--", "-v"],
    ],
)
def test_unrecognised_arguments_behave_like_no_arguments(cli_runner: CliRunner, args: list[str]) -> None:
    """Unknown words and unknown options fall back to the greeting without an error."""
    baseline = cli_runner.invoke(cli, [], obj=build_testing)
    result = cli_runner.invoke(cli, args, obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout == baseline.stdout
    assert not result.stderr


@pytest.mark.os_agnostic
@settings(max_examples=30, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(first=st.text(alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1, max_size=12))
def test_any_unrecognised_first_argument_prints_the_greeting(cli_runner: CliRunner, first: str) -> None:
    """Whatever is typed, only the six known tokens change the output."""
    if first in {"version", "-v", "--version", "help", "-h", "--help"}:
        return

    result = cli_runner.invoke(cli, [first], obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout == GREETING


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_version_without_stamp_prints_dev_and_runtime(cli_runner: CliRunner) -> None:
    """Unstamped builds report ``dev`` and the runtime lines only."""
    result = cli_runner.invoke(cli, ["version"], obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout == "Version: dev\nPython version: 3.13.0\nPlatform: linux/x86_64\n"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("token", ["version", "-v", "--version"])
def test_every_version_spelling_prints_the_same_block(
    cli_runner: CliRunner, testing_factory: TestingFactory, token: str
) -> None:
    """All three spellings print the full stamped block."""
    factory = testing_factory({"build": STAMPED_BUILD})

    result = cli_runner.invoke(cli, [token], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Version: v1.2.0",
        "Built: 2024-05-01T12:00:00Z",
        "Commit: 9f1c2ab",
        "Python version: 3.13.0",
        "Platform: linux/x86_64",
    ]


@pytest.mark.os_agnostic
def test_version_omits_unknown_commit_and_build_time(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    """Only the configured version is reported when time and commit are unknown."""
    factory = testing_factory({"build": {"version": "v1.2.0"}, "cli": {"show_runtime": False}})

    result = cli_runner.invoke(cli, ["version"], obj=factory)

    assert result.stdout == "Version: v1.2.0\n"


@pytest.mark.os_agnostic
def test_version_ignores_trailing_arguments(cli_runner: CliRunner) -> None:
    """Only the first argument selects the block."""
    result = cli_runner.invoke(cli, ["--version", "--help", "extra"], obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout.startswith("Version: dev\n")


@pytest.mark.os_agnostic
def test_version_reports_injected_runtime(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    """Runtime lines come from the runtime port."""
    factory = testing_factory({}, runtime=RuntimeInfo("3.11.9", "windows", "amd64"))

    result = cli_runner.invoke(cli, ["-v"], obj=factory)

    assert "Python version: 3.11.9\nPlatform: windows/amd64\n" in result.stdout


@pytest.mark.os_agnostic
def test_version_skips_runtime_port_when_disabled(cli_runner: CliRunner) -> None:
    """With ``show_runtime = false`` the host is never queried."""

    def _factory() -> AppServices:
        services = build_testing(config=None)

        def _unexpected() -> RuntimeInfo:
            raise AssertionError("runtime port must not be called")

        from lib_layered_config import Config

        return dataclasses.replace(
            services,
            get_config=lambda **_: Config({"cli": {"show_runtime": False}}, {}),
            get_runtime_info=_unexpected,
        )

    result = cli_runner.invoke(cli, ["version"], obj=_factory)

    assert result.exit_code == 0
    assert result.stdout == "Version: dev\n"


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
@pytest.mark.parametrize("token", ["help", "-h", "--help"])
def test_every_help_spelling_prints_the_usage_block(cli_runner: CliRunner, token: str) -> None:
    """All three spellings print the usage block and exit 0."""
    result = cli_runner.invoke(cli, [token], obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout == HELP_BLOCK


@pytest.mark.os_agnostic
def test_help_reports_the_resolved_version(cli_runner: CliRunner, testing_factory: TestingFactory) -> None:
    """The version in help follows the same resolution as the version block."""
    result = cli_runner.invoke(cli, ["help"], obj=testing_factory({"build": STAMPED_BUILD}))

    assert "Version: v1.2.0\n" in result.stdout
    assert "9f1c2ab" not in result.stdout


# ---------------------------------------------------------------------------
# Failures around the dispatcher
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "config_data",
    [
        {"cli": {"show_runtime": "sometimes"}},
        {"build": {"git_commit": ["9f1c2ab"]}},
        {"cli": "verbose"},
    ],
)
def test_invalid_configuration_exits_with_config_error(
    cli_runner: CliRunner, testing_factory: TestingFactory, config_data: dict[str, Any]
) -> None:
    """Bad [cli] or [build] values print ``Error:`` to stderr and exit 78."""
    result = cli_runner.invoke(cli, [], obj=testing_factory(config_data))

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Error: Invalid [" in result.stderr
    assert result.stdout == ""


@pytest.mark.os_agnostic
def test_rejected_configuration_is_logged_below_the_console_level(
    cli_runner: CliRunner, testing_factory: TestingFactory, caplog: pytest.LogCaptureFixture
) -> None:
    """The ``Error:`` line is the only user-facing report; the log record is debug detail."""
    import logging

    with caplog.at_level(logging.DEBUG):
        cli_runner.invoke(cli, [], obj=testing_factory({"cli": {"show_runtime": "sometimes"}}))

    rejected = [record for record in caplog.records if record.getMessage() == "Configuration rejected"]
    assert [record.levelno for record in rejected] == [logging.DEBUG]


@pytest.mark.os_agnostic
def test_production_config_error_is_reported_once(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    clear_config_cache: None,
    managed_traceback_state: None,
) -> None:
    """With real logging at its default level stderr carries a single error line."""
    from hello_buildinfo.composition import build_production

    monkeypatch.setenv("HELLO_BUILDINFO___CLI__SHOW_RUNTIME", "sometimes")

    exit_code = cli_mod.main(["version"], services_factory=build_production)

    err = capsys.readouterr().err
    assert exit_code == ExitCode.CONFIG_ERROR
    assert err.count("Invalid [cli] configuration") == 1
    assert "Configuration rejected" not in err


@pytest.mark.os_agnostic
def test_missing_services_factory_is_reported_as_a_bug(cli_runner: CliRunner) -> None:
    """Invoking the root command without a factory fails loudly."""
    result = cli_runner.invoke(cli, [], obj=None)

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    """main() refuses to run without explicit wiring."""
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["version"])


@pytest.mark.os_agnostic
def test_main_returns_zero_for_every_dispatch(capsys: pytest.CaptureFixture[str]) -> None:
    """Greeting, version and help all exit 0 through the wrapper."""
    codes = [cli_mod.main(args, services_factory=build_testing) for args in ([], ["version"], ["help"], ["nope"])]

    assert codes == [0, 0, 0, 0]
    assert capsys.readouterr().out.count("Hello, world!") == 2


@pytest.mark.os_agnostic
def test_main_maps_config_errors_to_exit_code_78(
    testing_factory: TestingFactory, capsys: pytest.CaptureFixture[str]
) -> None:
    """The wrapper returns the configuration exit code instead of raising."""
    exit_code = cli_mod.main([], services_factory=testing_factory({"cli": {"traceback": "loud"}}))

    assert exit_code == 78
    assert "cli.traceback" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_formats_unexpected_errors_via_exit_helpers(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """Unexpected exceptions are printed by lib_cli_exit_tools with a nonzero code."""

    def _broken_runtime() -> RuntimeInfo:
        raise RuntimeError("host inspection failed")

    def _factory() -> AppServices:
        return dataclasses.replace(build_testing(), get_runtime_info=_broken_runtime)

    exit_code = cli_mod.main(["version"], services_factory=_factory)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "host inspection failed" in plain_err


# ---------------------------------------------------------------------------
# Traceback state
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_traceback_setting_is_applied_during_the_run(
    managed_traceback_state: None, testing_factory: TestingFactory
) -> None:
    """``[cli] traceback = true`` enables tracebacks when not restored."""
    cli_mod.main(["version"], restore_traceback=False, services_factory=testing_factory({"cli": {"traceback": True}}))

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_traceback_state_is_restored_after_main(
    managed_traceback_state: None, testing_factory: TestingFactory
) -> None:
    """The previous traceback flags come back after every run."""
    cli_mod.main(["version"], services_factory=testing_factory({"cli": {"traceback": True}}))

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_snapshot_and_restore_round_trip(managed_traceback_state: None) -> None:
    """restore_traceback_state reapplies exactly what was captured."""
    saved = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(saved)

    assert cli_mod.snapshot_traceback_state() == (False, False)


# ---------------------------------------------------------------------------
# Context and wiring
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_get_cli_context_rejects_uninitialised_context() -> None:
    """Handlers cannot run before the root command stored its state."""
    import click

    ctx = click.Context(cli, obj=build_testing)

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        cli_mod.get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_handlers_cover_every_command() -> None:
    """Each resolvable command has exactly one output handler."""
    from hello_buildinfo.domain.enums import Command

    assert set(cli_mod.HANDLERS) == set(Command)


@pytest.mark.os_agnostic
def test_production_services_print_the_greeting(
    cli_runner: CliRunner,
    production_factory: Callable[[], AppServices],
    clear_config_cache: None,
) -> None:
    """Real configuration and logging do not disturb stdout."""
    result = cli_runner.invoke(cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Hello, world!" in result.stdout
    assert "Use 'hello version' to see version information" in result.stdout


@pytest.mark.os_agnostic
def test_production_version_reports_the_host(
    cli_runner: CliRunner,
    production_factory: Callable[[], AppServices],
    clear_config_cache: None,
) -> None:
    """The production runtime adapter feeds the version block."""
    import platform

    result = cli_runner.invoke(cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert "Version: " in result.stdout
    assert f"Python version: {platform.python_version()}" in result.stdout
