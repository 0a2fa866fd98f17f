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
"""Sequential access to the arguments of a format call.

The format string alone decides how each argument is read: an integer of the
width selected by the length modifier, a string, or a pointer for ``%n``. The
caller must pass arguments that agree with the format string. The cursor
raises ArgumentError when it can tell they do not, but it cannot detect every
mismatch (e.g. a 32-bit value passed for ``%hhd`` is silently truncated, as
it would be in C).
"""

import enum
from typing import Any, Iterable, Iterator, Union

from pw_printf.errors import ArgumentError


class Length(enum.Enum):
    """Argument widths selected by a length modifier."""

    BYTE = 8
    HALF = 16
    WORD = 32

    @property
    def bits(self) -> int:
        return self.value

    @property
    def mask(self) -> int:
        return (1 << self.value) - 1

    @property
    def sign_bit(self) -> int:
        return 1 << (self.value - 1)

    @classmethod
    def from_modifier(cls, modifier: str) -> 'Length':
        """Maps a length modifier to a width; no modifier selects HALF."""
        return _MODIFIERS.get(modifier, cls.HALF)


_MODIFIERS = {
    'hh': Length.BYTE,
    'h': Length.HALF,
    'z': Length.HALF,
    't': Length.HALF,
    'l': Length.WORD,
    'll': Length.WORD,
    'L': Length.WORD,
    'j': Length.WORD,
}


class IntPointer:
    """A mutable integer cell; the target of a ``%n`` conversion."""

    def __init__(self, value: int = 0):
        self.value = value

    def __repr__(self) -> str:
        return f'IntPointer({self.value})'


StringArg = Union[str, bytes, bytearray]


class ArgumentCursor:
    """Forward-only cursor over the arguments of one format call."""

    def __init__(self, args: Iterable[Any]):
        self._args: Iterator[Any] = iter(args)
        self._index = 0

    @property
    def consumed(self) -> int:
        """Number of arguments read so far."""
        return self._index

    def _next(self, kind: str) -> Any:
        try:
            arg = next(self._args)
        except StopIteration:
            raise ArgumentError(
                f'Missing argument {self._index} (expected {kind})'
            ) from None

        self._index += 1
        return arg

    def next_int(self, length: Length) -> int:
        """Reads an integer and returns its raw bits at the given width."""
        arg = self._next(f'{length.bits}-bit integer')
        if not isinstance(arg, int):
            raise ArgumentError(
                f'Argument {self._index - 1} is {type(arg).__name__}, '
                'expected an integer'
            )
        return arg & length.mask

    def next_string(self) -> str:
        """Reads a string argument; bytes are read as Latin-1 characters."""
        arg = self._next('string')
        if isinstance(arg, (bytes, bytearray)):
            return arg.decode('latin-1')
        if not isinstance(arg, str):
            raise ArgumentError(
                f'Argument {self._index - 1} is {type(arg).__name__}, '
                'expected a string'
            )
        return arg

    def next_pointer(self) -> IntPointer:
        """Reads the pointer that a %n conversion stores the count through."""
        arg = self._next('pointer')
        if not isinstance(arg, IntPointer):
            raise ArgumentError(
                f'Argument {self._index - 1} is {type(arg).__name__}, '
                'expected an IntPointer'
            )
        return arg
