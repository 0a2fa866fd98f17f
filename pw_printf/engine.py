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
"""Formats printf-style strings into a character sink.

The format(sink, format_string, args) function writes the formatted text one
character at a time and returns the number of characters written. See
pw_printf.field for the supported conversion specifiers.
"""

import logging
from typing import Any, Iterable

from pw_printf import convert
from pw_printf.args import ArgumentCursor
from pw_printf.field import FieldState, parse_specifier
from pw_printf.sink import CharSink

_LOG = logging.getLogger(__name__)


def _convert(
    output: convert.Output, field: FieldState, args: ArgumentCursor
) -> None:
    """Writes the conversion described by field, consuming its argument."""
    conversion = field.conversion

    if field.base:
        convert.emit_number(
            output,
            args.next_int(field.length),
            field.base,
            field.is_signed,
            field,
        )
    elif conversion == 's':
        convert.emit_string(output, args.next_string(), field)
    elif conversion == 'n':
        args.next_pointer().value = output.count
    elif conversion == '%':
        output.put('%')
    elif conversion:
        _LOG.debug('Skipping unknown conversion specifier %s', field)


def format(  # pylint: disable=redefined-builtin
    sink: CharSink, format_string: str, args: Iterable[Any] = ()
) -> int:
    """Formats a printf-style string, writing the output to sink.

    Args:
      sink: receives the output one character at a time
      format_string: the printf-style format string
      args: the values for the conversion specifiers, in order; their types
          and widths must agree with the format string

    Returns:
      the number of characters written to the sink

    Raises:
      SinkError: the sink rejected a character; nothing more is written
      ArgumentError: args ran out or an argument has the wrong type
    """
    output = convert.Output(sink)
    cursor = args if isinstance(args, ArgumentCursor) else ArgumentCursor(args)

    position = 0
    end = len(format_string)

    while position < end:
        char = format_string[position]

        if char != '%':
            output.put(char)
            position += 1
            continue

        field = parse_specifier(format_string, position)
        _convert(output, field, cursor)
        position = field.match.end()

    return output.count
