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
"""sprintf-style functions that format into a bytearray.

The destination holds one character per byte and is terminated with a 0 byte
after formatting, like a C string.
"""

import logging
from typing import Any, Iterable

from pw_printf.engine import format as _format
from pw_printf.sink import BoundedBufferSink, StringSink, UnboundedBufferSink

_LOG = logging.getLogger(__name__)


def vsnprintf(
    destination: bytearray, size: int, format_string: str, args: Iterable[Any]
) -> int:
    """Formats into at most size bytes of destination, including the 0.

    Returns the number of characters the full output has, which is larger than
    the number written if the output was truncated. If size is 0, nothing is
    written and 0 is returned.
    """
    if not size:
        return 0

    sink = BoundedBufferSink(destination, size)
    count = _format(sink, format_string, args)
    sink.terminate()

    if count > sink.position:
        _LOG.debug(
            'Truncated %r output to %d of %d characters',
            format_string,
            sink.position,
            count,
        )
    return count


def snprintf(
    destination: bytearray, size: int, format_string: str, *args: Any
) -> int:
    return vsnprintf(destination, size, format_string, args)


def vsprintf(
    destination: bytearray, format_string: str, args: Iterable[Any]
) -> int:
    """Formats into destination, which must have room for the output and 0."""
    sink = UnboundedBufferSink(destination)
    count = _format(sink, format_string, args)
    sink.terminate()
    return count


def sprintf(destination: bytearray, format_string: str, *args: Any) -> int:
    return vsprintf(destination, format_string, args)


def sprintf_str(format_string: str, *args: Any) -> str:
    """Formats to a new str."""
    sink = StringSink()
    _format(sink, format_string, args)
    return sink.value()
