"""Running ``infile < cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from .errors import EXIT_FAILURE, CommandNotFound, ExecError, PipexError, UsageError
from .fmt import fprintf
from .resolve import find_executable, path_directories
from .strtools import split


def _report(error: PipexError) -> None:
    if error.message:
        fprintf(sys.stderr, "%s\n", error.message)


def parse_command(text: str) -> list[str]:
    """Split a command line on spaces into its arguments.

    A command starting with a space is reported as not found; one with no
    words at all fails without a message.
    """
    if text.startswith(" "):
        raise CommandNotFound(text)
    words = split(text, " ")
    if not words:
        raise PipexError("")
    return words


def _spawn(text: str, stdin: int, stdout: int, env: Mapping[str, str]) -> subprocess.Popen:
    argv = parse_command(text)
    path = find_executable(argv[0], path_directories(env))
    if path is None:
        code = errno.EACCES if os.path.exists(argv[0]) else errno.ENOENT
        raise CommandNotFound(text, code)
    try:
        return subprocess.Popen(argv, executable=path, stdin=stdin, stdout=stdout, env=dict(env))
    except OSError as error:
        raise ExecError.from_oserror("Execve", error) from error


def _start_reader(text: str, read_end: int, outfile: str, env: Mapping[str, str]):
    try:
        out_fd = os.open(outfile, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, 0o666)
    except OSError as error:
        _report(ExecError.from_oserror(outfile, error))
        return None
    try:
        return _spawn(text, read_end, out_fd, env)
    except PipexError as error:
        _report(error)
        return None
    finally:
        os.close(out_fd)


def _start_writer(text: str, infile: str, write_end: int, env: Mapping[str, str]):
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as error:
        _report(ExecError.from_oserror(infile, error))
        return None
    try:
        return _spawn(text, in_fd, write_end, env)
    except PipexError as error:
        _report(error)
        return None
    finally:
        os.close(in_fd)


def _exit_code(process: subprocess.Popen | None) -> int:
    if process is None:
        return EXIT_FAILURE
    code = process.wait()
    return 128 - code if code < 0 else code


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` to ``first``, pipe its output into ``second``, write ``outfile``.

    Each side fails on its own: a missing input file or unknown command on
    one side is reported and the other side still runs. Returns the exit
    status of the second command, or 1 if it could not be started.
    """
    environment = os.environ if env is None else env
    read_end, write_end = os.pipe()
    try:
        reader = _start_reader(second, read_end, outfile, environment)
        writer = _start_writer(first, infile, write_end, environment)
    finally:
        os.close(read_end)
        os.close(write_end)
    _exit_code(writer)
    return _exit_code(reader)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        error = UsageError()
        _report(error)
        return error.exit_status
    infile, first, second, outfile = args
    return run_pipeline(infile, first, second, outfile, os.environ)