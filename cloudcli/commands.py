"""Building and running external commands, with an optional dry-run mode."""

from __future__ import annotations

import signal
import subprocess

from cloudcli import output


class CommandError(Exception):
    """An external command failed; carries whatever it printed."""

    def __init__(self, message: str, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


def _as_text(data: str | bytes | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data


def _describe_exit(returncode: int) -> str:
    if returncode >= 0:
        return f"exit status {returncode}"
    try:
        description = signal.strsignal(-returncode)
    except ValueError:
        description = None
    return f"signal: {(description or str(-returncode)).lower()}"


class Cmd:
    """A command line under construction; arguments are cleared after each run."""

    def __init__(self, name: str, dryrun: bool = False) -> None:
        self.name = name
        self.dryrun = dryrun
        self.args: list[str] = []

    def append_args(self, *args: str) -> None:
        """Add arguments to the command line."""
        self.args.extend(args)

    def __str__(self) -> str:
        return f"{self.name} {' '.join(self.args)}"

    def run(self, timeout: float | None = None) -> tuple[str, str]:
        """Run the command and return its stdout and stderr.

        Raises CommandError when it cannot start, fails or times out.
        """
        try:
            if self.dryrun:
                return "", ""
            return self._launch(timeout)
        finally:
            self.args = []

    def _launch(self, timeout: float | None) -> tuple[str, str]:
        try:
            completed = subprocess.run(
                [self.name, *self.args],
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandError(
                f"{self.name}: signal: killed", _as_text(exc.stdout), _as_text(exc.stderr)
            ) from exc
        except FileNotFoundError as exc:
            raise CommandError(
                f'{self.name}: exec: "{self.name}": executable file not found in $PATH'
            ) from exc
        except OSError as exc:
            raise CommandError(f"{self.name}: {exc}") from exc
        if completed.returncode != 0:
            raise CommandError(
                f"{self.name}: {_describe_exit(completed.returncode)}",
                completed.stdout,
                completed.stderr,
            )
        return completed.stdout, completed.stderr

    def execute(self, timeout: float | None = None) -> None:
        """Run the command, echoing its output; a failure ends the program."""
        if self.dryrun:
            output.info(str(self))
            return
        try:
            stdout, stderr = self.run(timeout)
        except CommandError as exc:
            if exc.stderr:
                output.warn(exc.stderr)
            if exc.stdout:
                output.verbose(exc.stdout)
            output.error(str(exc))
        if stderr:
            output.warn(stderr)
        if stdout:
            output.verbose(stdout)