#!/usr/bin/env python3
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
"""Tests the sprintf-style wrappers and the sinks they use."""

import io
import unittest

from pw_printf import stdio
from pw_printf.sink import (
    BoundedBufferSink,
    CallbackSink,
    StreamSink,
    StringSink,
    UnboundedBufferSink,
)


class TestSnprintf(unittest.TestCase):
    """Tests the bounded functions."""

    def test_truncates_and_returns_full_count(self) -> None:
        buffer = bytearray(b'\xff' * 8)
        self.assertEqual(stdio.snprintf(buffer, 4, 'hello'), 5)
        self.assertEqual(buffer[:4], b'hel\0')
        self.assertEqual(buffer[4:], b'\xff' * 4)

    def test_exact_fit(self) -> None:
        buffer = bytearray(6)
        self.assertEqual(stdio.snprintf(buffer, 6, 'hello'), 5)
        self.assertEqual(buffer, b'hello\0')

    def test_size_zero_does_nothing(self) -> None:
        buffer = bytearray(b'xyz')
        self.assertEqual(stdio.snprintf(buffer, 0, 'hello'), 0)
        self.assertEqual(buffer, b'xyz')

    def test_size_one_only_terminates(self) -> None:
        buffer = bytearray(b'xyz')
        self.assertEqual(stdio.snprintf(buffer, 1, '%d', 12345), 5)
        self.assertEqual(buffer, b'\0yz')

    def test_arguments(self) -> None:
        buffer = bytearray(16)
        self.assertEqual(
            stdio.snprintf(buffer, len(buffer), '%s:%-4x|', 'id', 0xab), 8
        )
        self.assertEqual(buffer[:9], b'id:ab  |\0')

    def test_vsnprintf(self) -> None:
        buffer = bytearray(5)
        self.assertEqual(stdio.vsnprintf(buffer, 5, '%05u', [7, 8]), 5)
        self.assertEqual(buffer, b'0000\0')

    def test_wide_character_is_replaced(self) -> None:
        buffer = bytearray(b'\xff' * 8)
        self.assertEqual(stdio.snprintf(buffer, 8, 'ab%s', '€'), 3)
        self.assertEqual(buffer[:4], b'ab?\0')

    def test_wide_character_truncated(self) -> None:
        buffer = bytearray(b'\xff' * 4)
        self.assertEqual(stdio.snprintf(buffer, 3, '%s|', '€€\xe9'), 4)
        self.assertEqual(buffer, b'??\0\xff')


class TestSprintf(unittest.TestCase):
    """Tests the unbounded functions."""

    def test_sprintf(self) -> None:
        buffer = bytearray(16)
        self.assertEqual(stdio.sprintf(buffer, '%d-%s', 12, 'ab'), 5)
        self.assertEqual(buffer[:6], b'12-ab\0')

    def test_vsprintf(self) -> None:
        buffer = bytearray(b'\xff' * 4)
        self.assertEqual(stdio.vsprintf(buffer, '%hhX', [0x1ab]), 2)
        self.assertEqual(buffer, b'AB\0\xff')

    def test_latin1_and_wide_characters(self) -> None:
        buffer = bytearray(8)
        self.assertEqual(stdio.sprintf(buffer, '%s%s', '\xe9', '€'), 2)
        self.assertEqual(buffer[:3], b'\xe9?\0')

    def test_sprintf_str_keeps_wide_characters(self) -> None:
        self.assertEqual(stdio.sprintf_str('%3s', '€'), '  €')

    def test_sprintf_str(self) -> None:
        self.assertEqual(stdio.sprintf_str('%04X|%4x', 0xbe, 0x1ff),
                         '00BE| 1ff')


class TestSinks(unittest.TestCase):
    """Tests the standard sinks."""

    def test_string_sink(self) -> None:
        sink = StringSink()
        self.assertTrue(sink.put('a'))
        self.assertTrue(sink.put('b'))
        self.assertEqual(str(sink), 'ab')

    def test_stream_sink(self) -> None:
        stream = io.StringIO()
        sink = StreamSink(stream)
        self.assertTrue(sink.put('z'))
        self.assertEqual(stream.getvalue(), 'z')

    def test_callback_sink_passes_context(self) -> None:
        calls = []
        sink = CallbackSink(lambda c, ctx: calls.append((c, ctx)) or True,
                            'context')
        self.assertTrue(sink.put('q'))
        self.assertEqual(calls, [('q', 'context')])

    def test_callback_sink_failure(self) -> None:
        sink = CallbackSink(lambda c, ctx: False)
        self.assertFalse(sink.put('q'))

    def test_bounded_sink_drops_when_full(self) -> None:
        buffer = bytearray(3)
        sink = BoundedBufferSink(buffer, 3)
        for char in 'abcd':
            self.assertTrue(sink.put(char))
        self.assertTrue(sink.full)
        self.assertEqual(sink.position, 2)
        sink.terminate()
        self.assertEqual(buffer, b'ab\0')

    def test_bounded_sink_needs_capacity(self) -> None:
        with self.assertRaises(ValueError):
            BoundedBufferSink(bytearray(1), 0)

    def test_unbounded_sink(self) -> None:
        buffer = bytearray(4)
        sink = UnboundedBufferSink(buffer)
        for char in 'abc':
            self.assertTrue(sink.put(char))
        sink.terminate()
        self.assertEqual(buffer, b'abc\0')


if __name__ == '__main__':
    unittest.main()
