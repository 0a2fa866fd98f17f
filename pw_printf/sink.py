# Copyright 2024 The Pigweed Authors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
"""Character sinks that formatted output is written through.

A sink has a single operation, put(), which accepts one character and returns
whether it was accepted. Returning False aborts the format call that is
writing to the sink.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TextIO

TERMINATOR = 0

# Byte written for characters that do not fit in one byte.
REPLACEMENT = ord('?')


class CharSink(ABC):
    """Accepts formatted output one character at a time."""

    @abstractmethod
    def put(self, char: str) -> bool:
        """Writes one character; returns False to abort formatting."""


class CallbackSink(CharSink):
    """Forwards characters to a put(char, context) callback."""

    def __init__(
        self, callback: Callable[[str, Any], bool], context: Any = None
    ):
        self._callback = callback
        self._context = context

    def put(self, char: str) -> bool:
        return bool(self._callback(char, self._context))


class StringSink(CharSink):
    """Collects output in memory."""

    def __init__(self) -> None:
        self._chars: List[str] = []

    def put(self, char: str) -> bool:
        self._chars.append(char)
        return True

    def value(self) -> str:
        return ''.join(self._chars)

    def __str__(self) -> str:
        return self.value()


class StreamSink(CharSink):
    """Writes each character to a text stream, such as sys.stdout."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def put(self, char: str) -> bool:
        self._stream.write(char)
        return True


def _encode(char: str) -> int:
    code = ord(char)
    return code if code <= 0xFF else REPLACEMENT


class _BufferSink(CharSink):
    """Writes characters as bytes into a caller-provided bytearray.

    Characters outside Latin-1 are written as ``?``.
    """

    def __init__(self, destination: bytearray, end: Optional[int]):
        self._destination = destination
        self._position = 0
        self._end = end

    @property
    def position(self) -> int:
        """Index at which the next character or the terminator is written."""
        return self._position

    def put(self, char: str) -> bool:
        # Characters past the end are dropped, but still reported as written.
        if self._position != self._end:
            self._destination[self._position] = _encode(char)
            self._position += 1
        return True

    def terminate(self) -> None:
        self._destination[self._position] = TERMINATOR


class BoundedBufferSink(_BufferSink):
    """Writes at most capacity - 1 characters, leaving room for a terminator.

    Characters beyond the capacity are silently discarded. The sink never
    fails, so a format call's count includes the discarded characters.
    """

    def __init__(self, destination: bytearray, capacity: int):
        if capacity <= 0:
            raise ValueError('A bounded sink needs room for the terminator')
        super().__init__(destination, capacity - 1)
        self.capacity = capacity

    @property
    def full(self) -> bool:
        return self.position == self._end


class UnboundedBufferSink(_BufferSink):
    """Writes with no capacity check; the destination must be large enough."""

    def __init__(self, destination: bytearray):
        super().__init__(destination, None)
