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
"""Exceptions raised by pw_printf."""


class Error(Exception):
    """Base class for pw_printf errors."""


class SinkError(Error):
    """A sink rejected a character; the formatting call failed as a whole.

    No partial count is reported when this is raised. Characters emitted before
    the rejection have already been handed to the sink.
    """

    def __init__(self, char: str, count: int):
        super().__init__(
            f'Sink rejected {char!r} after {count - 1} characters'
        )
        self.char = char
        self.count = count


class ArgumentError(Error, ValueError):
    """The arguments do not match what the format string consumes."""
