"""Console prompts that read and validate edit requests from the user."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import IO, Optional, TypeVar

from .parser import Parser, Token
from .requests import Messages

R = TypeVar("R")


class Dialogue:
    """Text dialogue over an input and an output stream (stdin/stdout by default)."""

    def __init__(self, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._parser = Parser()

    @property
    def _in(self) -> IO[str]:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> IO[str]:
        return self._stdout if self._stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def print_message(self, message: str) -> None:
        self._write(f"{message}\n")

    def get_user_request(
        self,
        messages: Messages,
        validator: Callable[[Sequence[Token]], Optional[R]],
    ) -> Optional[R]:
        """Prompt until the validator accepts a line; None if the user types "exit".

        Raises EOFError when the input stream is closed.
        """
        self.print_message(messages.hint)
        while True:
            self._write("> ")
            line = self._in.readline()
            if not line:
                self._write("Input error. Try again.\n")
                raise EOFError("input stream closed")
            line = line.rstrip("\n")
            if line == "exit":
                self._write("Input cancelled.\n")
                return None
            request = validator(self._parser.tokenize(line))
            if request is not None:
                return request
            self.print_message(messages.failure)