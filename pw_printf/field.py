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
"""Parses printf-style conversion specifiers.

Supported syntax: ``%[flags][width][.precision][length]conversion``

- Flags (zero or more, any order)

  - ``#``: Accepted, but no conversion uses it.
  - ``0``: Pads numbers with ``0`` rather than spaces on the left. Has no
    effect if a precision is given or the field is left-justified.
  - ``-``: Left-justifies within the field width.
  - `` `` (space): Prefixes non-negative signed numbers with a space.
  - ``+``: Prefixes non-negative signed numbers with ``+``. Overrides space.

- Width: a decimal minimum field width.
- Precision: ``.`` followed by

  - decimal digits: the minimum digit count for numbers, or the maximum
    character count for strings;
  - ``-`` and any digits: the digits are skipped and the precision is left
    unspecified, as if no precision had been given (apart from cancelling the
    ``0`` flag);
  - nothing: a precision of 0.

- Length: ``hh`` reads an 8-bit argument; ``h``, ``z``, ``t``, or no modifier
  read a 16-bit argument; ``l``, ``ll``, ``L``, and ``j`` read a 32-bit
  argument.
- Conversion: ``d`` and ``i`` (signed decimal), ``u`` (unsigned decimal),
  ``o`` (octal), ``x`` and ``X`` (hexadecimal), ``s`` (string), ``n`` (store
  the number of characters written so far), ``%`` (a literal ``%``).

Any other conversion character is skipped without output and without
consuming an argument.
"""

import enum
import re
from typing import Iterator

from pw_printf.args import Length

# Regular expression for a single conversion specifier. The conversion group
# matches any character, or nothing at the end of the string. Width and
# precision digits are ASCII only.
FORMAT_SPEC = re.compile(
    r'%(?P<flags>[#0\- +]*)'
    r'(?P<width>\d*)'
    r'(?P<precision>\.(?:\d+|-\d*)?)?'
    r'(?P<length>hh|h|z|t|ll|l|L|j)?'
    r'(?P<conversion>.?)',
    re.ASCII | re.DOTALL,
)

UNSPECIFIED = -1

SIGNED_INT = frozenset('di')
UNSIGNED_INT = frozenset('uoxX')
RECOGNIZED = frozenset('diuoxXsn%')

# Added to the digit value plus '0' to reach the letter for digits >= 10.
LOWER_HEX_OFFSET = ord('a') - ord('0') - 10
UPPER_HEX_OFFSET = ord('A') - ord('0') - 10

_BASES = {'d': 10, 'i': 10, 'u': 10, 'o': 8, 'x': 16, 'X': 16}


class ArgumentKind(enum.Enum):
    """What a conversion reads from the argument sequence."""

    NONE = 0
    INTEGER = 1
    STRING = 2
    POINTER = 3


class FieldState:
    """Formatting parameters for one conversion specifier."""

    def __init__(self, match: re.Match):
        """Builds the field state from a FORMAT_SPEC match."""
        self.match = match
        self.specifier: str = match.group()

        flags = match.group('flags')
        self.alternate = '#' in flags
        self.left = '-' in flags
        self.pad = '0' if '0' in flags else ' '

        if '+' in flags:
            self.sign = '+'
        elif ' ' in flags:
            self.sign = ' '
        else:
            self.sign = ''

        width = match.group('width')
        self.field_width = int(width) if width else UNSPECIFIED

        precision = match.group('precision')
        if precision is None:
            self.precision = UNSPECIFIED
        else:
            self.pad = ' '
            if precision == '.':
                self.precision = 0
            elif precision.startswith('.-'):
                self.precision = UNSPECIFIED
            else:
                self.precision = int(precision[1:])

        self.length = Length.from_modifier(match.group('length') or '')
        self.conversion: str = match.group('conversion')

        if self.conversion == 'x':
            self.hex_offset = LOWER_HEX_OFFSET
        elif self.conversion == 'X':
            self.hex_offset = UPPER_HEX_OFFSET
        else:
            self.hex_offset = 0

    @classmethod
    def from_string(cls, specifier: str) -> 'FieldState':
        """Creates a FieldState from a str with a single specifier."""
        match = FORMAT_SPEC.fullmatch(specifier)

        if not match:
            raise ValueError(
                f'{specifier!r} is not a valid single format specifier'
            )

        return cls(match)

    @property
    def is_signed(self) -> bool:
        return self.conversion in SIGNED_INT

    @property
    def base(self) -> int:
        """The numeric base of an integer conversion; 0 for others."""
        return _BASES.get(self.conversion, 0)

    @property
    def argument_kind(self) -> ArgumentKind:
        if self.conversion in SIGNED_INT or self.conversion in UNSIGNED_INT:
            return ArgumentKind.INTEGER
        if self.conversion == 's':
            return ArgumentKind.STRING
        if self.conversion == 'n':
            return ArgumentKind.POINTER
        return ArgumentKind.NONE

    @property
    def recognized(self) -> bool:
        return self.conversion in RECOGNIZED

    def __str__(self) -> str:
        return self.specifier

    def __repr__(self) -> str:
        return f'FieldState({self.specifier!r})'


def parse_specifier(format_string: str, position: int) -> FieldState:
    """Parses the specifier that starts with the % at position."""
    match = FORMAT_SPEC.match(format_string, position)
    if match is None:
        raise ValueError(f'No % at {position} in {format_string!r}')
    return FieldState(match)


def parse_specifiers(format_string: str) -> Iterator[FieldState]:
    """Yields the field state of each specifier in a format string.

    Literal text is skipped exactly as the formatter skips it, so ``%%`` and
    unrecognized conversions are reported as specifiers too.
    """
    position = format_string.find('%')
    while position != -1:
        field = parse_specifier(format_string, position)
        yield field
        position = format_string.find('%', field.match.end())
