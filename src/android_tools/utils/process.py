"""Subprocess wrapper for all external tool invocations."""

import shlex
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import IO, TextIO

from android_tools.exceptions import CommandExecutionError, ProcessError
from android_tools.utils.output import console


def decode_output(data: bytes | None) -> str:
    """Decode captured output as UTF-8, replacing invalid byte sequences."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CommandSpec:
    """A resolved executable plus its ordered arguments."""

    executable: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """Full argument vector, executable first."""
        return [self.executable, *self.args]

    def render(self) -> str:
        """Shell-quoted rendering used in diagnostics."""
        return shlex.join(self.argv)

    def __str__(self) -> str:
        return self.render()


@dataclass
class ProcessResult:
    """Exit status and decoded output of one finished tool run."""

    command: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout with surrounding whitespace removed."""
        return self.stdout.strip()

    @property
    def lines(self) -> list[str]:
        """Non-blank stdout lines, e.g. one package per line of `pm list`."""
        return [line for line in self.stdout.splitlines() if line.strip()]


def _tee(source: IO[bytes], sink: TextIO, chunks: list[bytes]) -> None:
    for raw in iter(source.readline, b""):
        chunks.append(raw)
        sink.write(decode_output(raw))
        sink.flush()
    source.close()


def _run_streaming(
    argv: list[str],
    *,
    timeout: float | None,
    cwd: str | None,
) -> tuple[int, bytes, bytes]:
    """Run a child, echoing its output line by line while capturing it."""
    stdout_chunks: list[bytes] = []
    stderr_chunks: list[bytes] = []

    with subprocess.Popen(
        argv,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=cwd,
    ) as proc:
        assert proc.stdout is not None and proc.stderr is not None
        readers = [
            threading.Thread(
                target=_tee, args=(proc.stdout, sys.stdout, stdout_chunks), daemon=True
            ),
            threading.Thread(
                target=_tee, args=(proc.stderr, sys.stderr, stderr_chunks), daemon=True
            ),
        ]
        for reader in readers:
            reader.start()
        try:
            returncode = proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            raise
        finally:
            for reader in readers:
                reader.join()

    return returncode, b"".join(stdout_chunks), b"".join(stderr_chunks)


def run_tool(
    command: list[str] | CommandSpec,
    *,
    check: bool = True,
    capture_output: bool = True,
    stream: bool = False,
    timeout: float | None = None,
    cwd: str | None = None,
) -> ProcessResult:
    """Run an external tool command.

    Args:
        command: Command and arguments to run, or a resolved CommandSpec.
        check: If True, raise ProcessError on non-zero exit.
        capture_output: If True, capture stdout and stderr.
        stream: If True, echo output live to this process's stdout/stderr
            while still capturing it. Implies capture_output.
        timeout: Optional timeout in seconds.
        cwd: Working directory for the command.

    Returns:
        ProcessResult with command output. Output is decoded as UTF-8 with
        invalid bytes replaced.

    Raises:
        ProcessError: If check=True and command returns non-zero, or on timeout.
        CommandExecutionError: If the process could not be spawned or waited on.
    """
    argv = command.argv if isinstance(command, CommandSpec) else list(command)
    rendered = shlex.join(argv)
    console.print_command(rendered)

    try:
        if stream:
            returncode, raw_stdout, raw_stderr = _run_streaming(
                argv, timeout=timeout, cwd=cwd
            )
        else:
            result = subprocess.run(
                argv,
                capture_output=capture_output,
                timeout=timeout,
                cwd=cwd,
            )
            returncode, raw_stdout, raw_stderr = (
                result.returncode,
                result.stdout,
                result.stderr,
            )
    except subprocess.TimeoutExpired as e:
        raise ProcessError(rendered, -1, f"Command timed out after {timeout}s") from e
    except OSError as e:
        raise CommandExecutionError(rendered, str(e)) from e

    proc_result = ProcessResult(
        command=argv,
        returncode=returncode,
        stdout=decode_output(raw_stdout),
        stderr=decode_output(raw_stderr),
    )

    if check and not proc_result.success:
        raise ProcessError(
            rendered, returncode, proc_result.stderr, stdout=proc_result.stdout
        )

    return proc_result
