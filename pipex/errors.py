"""Exceptions raised by the pipeline and the messages they carry."""

from __future__ import annotations

import errno as _errno
import os

EXIT_FAILURE = 1


class PipexError(Exception):
    """Base class for every failure that ends the program."""

    exit_status: int = EXIT_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UsageError(PipexError):
    """The program was called with the wrong number of arguments."""

    def __init__(self, message: str = "ERROR : wrong arg number") -> None:
        super().__init__(message)


class CommandNotFound(PipexError):
    """A command could not be resolved to an executable file.

    Bare names are reported as "not found"; names given as an absolute
    path are reported with the system error text, like ``perror``.
    """

    def __init__(self, name: str, code: int | None = None) -> None:
        self.name = name
        self.code = code if code is not None else _errno.ENOENT
        if name.startswith("/"):
            message = f"{name}: {os.strerror(self.code)}"
        else:
            message = f"{name} : Command not found"
        super().__init__(message)


class ExecError(PipexError):
    """A system call failed; the message has the ``perror`` form."""

    def __init__(self, context: str, code: int) -> None:
        self.context = context
        self.code = code
        super().__init__(f"{context}: {os.strerror(code)}")

    @classmethod
    def from_oserror(cls, context: str, error: OSError) -> "ExecError":
        """Build the error from an ``OSError`` raised by the standard library."""
        return cls(context, error.errno if error.errno is not None else _errno.EIO)