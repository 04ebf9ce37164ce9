import re
import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Optional, TextIO

from .exceptions import MalformedInput

INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class InputSource(ABC):
    """Abstracts where the `input` built-in reads its integers from."""

    @abstractmethod
    def read_int(self) -> int: ...


class StreamInput(InputSource):
    """Reads whitespace-delimited integer tokens from a text stream, one line at a time."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: Deque[str] = deque()

    @property
    def stream(self) -> TextIO:
        return self._stream

    def _next_token(self) -> Optional[str]:
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> int:
        token = self._next_token()
        if token is None:
            raise MalformedInput("Input Error: input source is exhausted.")
        if not INTEGER_TOKEN.fullmatch(token):
            raise MalformedInput(f"Input Error: '{token}' is not an integer.")
        try:
            return int(token)
        except ValueError as e:
            raise MalformedInput(f"Input Error: '{token[:20]}...' is too large to read.") from e


class ConsoleInput(StreamInput):
    """Console-backed input used by the CLI and REPL."""

    def __init__(self):
        super().__init__(sys.stdin)

    @property
    def stream(self) -> TextIO:
        return sys.stdin
