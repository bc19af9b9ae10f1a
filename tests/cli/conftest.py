# topmark:header:start
#
#   project      : SvgScribe
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""CLI test helpers for running SvgScribe in a controlled working directory.

Configuration discovery reads ``pyproject.toml`` and ``svgscribe.toml`` from the
current directory, so tests that depend on config files run the CLI through
`run_cli_in()`, which changes to the given directory for the duration of the
invocation.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from svgscribe.cli.exit_codes import ExitCode
from svgscribe.cli.main import cli
from svgscribe.config import logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep output uncolored and reinstall the test logging setup after each run."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["hello", "-o", "a.svg"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files in the working
    directory (``--help``, ``version``, ``defaults``), or pass ``--no-config``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
