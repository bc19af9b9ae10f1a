# topmark:header:start
#
#   project      : SvgScribe
#   file         : errors.py
#   file_relpath : src/svgscribe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Exceptions for the SvgScribe CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. The library itself never raises them: sink errors
    and configuration errors are translated at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from svgscribe.cli.exit_codes import ExitCode


class SvgscribeError(click.ClickException):
    """Base class for all SvgScribe CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SvgscribeUsageError(SvgscribeError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SvgscribeConfigError(SvgscribeError):
    """Error for configuration errors (unreadable/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SvgscribeFileNotFoundError(SvgscribeError):
    """Error when an output directory does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SvgscribePermissionDeniedError(SvgscribeError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class SvgscribeIOError(SvgscribeError):
    """Error for I/O errors writing documents."""

    exit_code = ExitCode.IO_ERROR
