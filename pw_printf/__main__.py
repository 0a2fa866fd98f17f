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
"""Formats a printf-style string with arguments from the command line.

Arguments for integer conversions are parsed as Python integer literals
(e.g. 42, -7, 0xff, 0o17, 0b101), falling back to decimal so that 010 is
ten. Arguments for %s are used as is. %n conversions do not take a command
line argument; the stored counts are logged instead.

  python -m pw_printf '%-6s|%04x|' abc 0xbeef
  python -m pw_printf --size 4 'hello'
  python -m pw_printf '%+d' -- -7
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import Any, List, Optional, Sequence

from pw_printf import log
from pw_printf.args import IntPointer
from pw_printf.config import PrintfConfig
from pw_printf.engine import format as format_to_sink
from pw_printf.errors import Error
from pw_printf.field import ArgumentKind, parse_specifiers
from pw_printf.sink import StreamSink
from pw_printf.stdio import vsnprintf

_LOG = logging.getLogger('pw_printf')


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parses and return command line arguments."""

    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('format_string', help='The printf-style string.')
    parser.add_argument(
        'args', nargs='*', help='Arguments for the conversion specifiers.'
    )
    parser.add_argument(
        '--size',
        type=int,
        help=(
            'Format into a buffer of this many bytes, including the '
            'terminator, truncating the output if needed.'
        ),
    )
    parser.add_argument(
        '--show-count',
        action='store_true',
        default=None,
        help='Log the number of characters the output has.',
    )
    parser.add_argument(
        '--config',
        type=Path,
        help='YAML config file to load instead of the default files.',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Show debug logs.'
    )
    return parser.parse_args(argv)


def _parse_integer(raw: str) -> int:
    try:
        return int(raw, 0)
    except ValueError:
        # Prefix-less literals with leading zeros, such as 010, are decimal.
        return int(raw, 10)


def coerce_arguments(
    format_string: str, raw_args: Sequence[str]
) -> List[Any]:
    """Converts command line strings to the types the format string reads.

    Raises:
      ValueError: an argument is missing, extra, or not a valid integer
    """
    args: List[Any] = []
    remaining = list(raw_args)

    for field in parse_specifiers(format_string):
        kind = field.argument_kind

        if kind is ArgumentKind.POINTER:
            args.append(IntPointer())
            continue

        if kind is ArgumentKind.NONE:
            continue

        if not remaining:
            raise ValueError(f'Missing an argument for {field}')

        raw = remaining.pop(0)
        if kind is ArgumentKind.INTEGER:
            try:
                args.append(_parse_integer(raw))
            except ValueError:
                raise ValueError(
                    f'{raw!r} is not an integer, as {field} requires'
                ) from None
        else:
            args.append(raw)

    if remaining:
        raise ValueError(f'{len(remaining)} unused argument(s): {remaining}')

    return args


def _load_config(config_file: Optional[Path]) -> PrintfConfig:
    if config_file is None:
        return PrintfConfig()

    config = PrintfConfig(
        project_file=None, user_file=None, environment_var=None
    )
    config.load_config_file(config_file)
    return config


def run(
    format_string: str,
    args: Sequence[str],
    size: Optional[int],
    show_count: Optional[bool],
    config: Optional[Path],
    verbose: bool,
) -> int:
    """Formats to stdout; returns the exit code."""
    settings = _load_config(config)

    log.install(
        level=logging.DEBUG if verbose else settings.log_level,
        hide_timestamp=True,
    )

    if size is None:
        size = settings.buffer_size
    if show_count is None:
        show_count = settings.show_count

    try:
        values = coerce_arguments(format_string, args)

        if size is None:
            count = format_to_sink(
                StreamSink(sys.stdout), format_string, values
            )
        else:
            buffer = bytearray(max(size, 1))
            count = vsnprintf(buffer, size, format_string, values)
            sys.stdout.write(
                buffer.split(b'\0', 1)[0].decode('latin-1') if size else ''
            )
    except (Error, ValueError) as err:
        _LOG.error('%s', err)
        return 1

    sys.stdout.write('\n')

    for i, value in enumerate(values):
        if isinstance(value, IntPointer):
            _LOG.info('%%n argument %d stored %d', i, value.value)

    if show_count:
        _LOG.info('Formatted %d characters', count)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(**vars(_parse_args(argv)))


if __name__ == '__main__':
    sys.exit(main())
