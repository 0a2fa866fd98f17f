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
"""Emits integers and strings according to a field state."""

import logging

from pw_printf.errors import SinkError
from pw_printf.field import FieldState
from pw_printf.sink import CharSink

_LOG = logging.getLogger(__name__)

STRING_TERMINATOR = '\0'


class Output:
    """Counts characters as they are written to a sink."""

    def __init__(self, sink: CharSink):
        self.sink = sink
        self.count = 0

    def put(self, char: str) -> None:
        """Writes one character; raises SinkError if the sink rejects it."""
        self.count += 1
        if not self.sink.put(char):
            _LOG.debug('%r rejected %r', self.sink, char)
            raise SinkError(char, self.count)

    def repeat(self, char: str, times: int) -> None:
        for _ in range(times):
            self.put(char)


def to_digits(magnitude: int, base: int, capacity: int) -> bytearray:
    """Converts a non-negative integer to its digit values, most significant
    first. There is always at least one digit.

    capacity is the size of the scratch buffer, which must hold the base-2
    representation of the largest value of the argument's width.
    """
    buffer = bytearray(capacity)
    start = capacity

    while True:
        start -= 1
        buffer[start] = magnitude % base
        magnitude //= base
        if not magnitude:
            break

    return buffer[start:]


def digit_char(digit: int, hex_offset: int) -> str:
    char = ord('0') + digit
    if digit > 9:
        char += hex_offset
    return chr(char)


def emit_number(
    output: Output, raw: int, base: int, is_signed: bool, field: FieldState
) -> None:
    """Writes an integer argument.

    Args:
      output: where to write the characters
      raw: the argument's bits at the width given by field.length
      base: 8, 10, or 16
      is_signed: whether raw is a two's complement signed value
      field: the specifier's formatting parameters
    """
    length = field.length
    magnitude = raw & length.mask

    if not is_signed:
        sign = ''
    elif magnitude & length.sign_bit:
        magnitude = -magnitude & length.mask
        sign = '-'
    else:
        sign = field.sign

    digits = to_digits(magnitude, base, length.bits)

    zero_pad = max(0, field.precision - len(digits))
    outer_pad = max(0, field.field_width - zero_pad - len(sign) - len(digits))

    if not field.left:
        output.repeat(field.pad, outer_pad)

    if sign:
        output.put(sign)

    output.repeat('0', zero_pad)

    for digit in digits:
        output.put(digit_char(digit, field.hex_offset))

    if field.left:
        output.repeat(' ', outer_pad)


def emit_string(output: Output, text: str, field: FieldState) -> None:
    """Writes a string argument, truncated to the precision if one is set.

    The string ends at its first NUL character, if it has one. Padding is
    always spaces.
    """
    end = text.find(STRING_TERMINATOR)
    if end != -1:
        text = text[:end]

    if field.precision >= 0:
        text = text[: field.precision]

    padding = max(0, field.field_width - len(text))

    if not field.left:
        output.repeat(' ', padding)

    for char in text:
        output.put(char)

    if field.left:
        output.repeat(' ', padding)
