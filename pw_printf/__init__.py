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
"""printf-style formatting through a character sink."""

from pw_printf.args import ArgumentCursor, IntPointer, Length
from pw_printf.engine import format
from pw_printf.errors import ArgumentError, Error, SinkError
from pw_printf.field import ArgumentKind, FieldState, parse_specifiers
from pw_printf.sink import (
    BoundedBufferSink,
    CallbackSink,
    CharSink,
    StreamSink,
    StringSink,
    UnboundedBufferSink,
)
from pw_printf.stdio import snprintf, sprintf, sprintf_str, vsnprintf, vsprintf
