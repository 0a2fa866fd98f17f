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
"""Tools for configuring Python logging for the pw_printf tools."""

import logging
import os
from pathlib import Path
import sys
from typing import NamedTuple, Optional, Union

_STDERR_HANDLER = logging.StreamHandler()


class _LogLevel(NamedTuple):
    level: int
    color: str
    ascii: str


# Shorten all the log levels to 3 characters for column-aligned logs.
# Color the logs using ANSI codes.
_LOG_LEVELS = (
    _LogLevel(logging.CRITICAL, 'bold_red', 'CRT'),
    _LogLevel(logging.ERROR,    'red',      'ERR'),
    _LogLevel(logging.WARNING,  'yellow',   'WRN'),
    _LogLevel(logging.INFO,     'magenta',  'INF'),
    _LogLevel(logging.DEBUG,    'blue',     'DBG'),
)  # yapf: disable


# ANSI codes for the colors the log format uses.
_ANSI_CODES = {
    'bold_red': (30, 41),
    'red': (31, 1),
    'yellow': (33, 1),
    'magenta': (35, 1),
    'blue': (34, 1),
    'timestamp': (30, 47),  # black on white
}


def colorize(color: str, text: str, enabled: bool = True) -> str:
    """Surrounds text with the ANSI escapes for a color in _ANSI_CODES."""
    if not enabled:
        return text

    start = ''.join(f'\033[{code}m' for code in _ANSI_CODES[color])
    return f'{start}{text}\033[0m'


def strict_bool(value: str) -> bool:
    """Parses an environment variable as a boolean ('1' or 'true')."""
    return value.lower() in ('1', 'true')


def use_color(enabled: Optional[bool] = None) -> bool:
    """Decides whether to color logs.

    If enabled is None, color is used when PW_USE_COLOR allows it and stderr is
    a terminal.
    """
    if enabled is not None:
        return enabled

    env = os.environ.get('PW_USE_COLOR')
    if env is not None:
        return strict_bool(env)

    return sys.stderr.isatty()


def _setup_handler(
    handler: logging.Handler, formatter: logging.Formatter, level: int
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logging.getLogger().addHandler(handler)


def install(
    level: int = logging.INFO,
    color_enabled: Optional[bool] = None,
    hide_timestamp: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Configures the system logger for the pw_printf log format."""

    color = use_color(color_enabled)

    if hide_timestamp:
        timestamp_fmt = ''
    else:
        # This applies a gray background to the time to make the log lines
        # distinct from other output.
        timestamp_fmt = colorize('timestamp', '%(asctime)s', color) + ' '

    formatter = logging.Formatter(
        timestamp_fmt + '%(levelname)s %(message)s', '%Y%m%d %H:%M:%S'
    )

    # Set the log level on the root logger to 1, so logs that all logs
    # propagated from child loggers are handled.
    logging.getLogger().setLevel(1)

    # Always set up the stderr handler, even if it isn't used.
    _setup_handler(_STDERR_HANDLER, formatter, level)

    if log_file:
        _setup_handler(logging.FileHandler(log_file), formatter, level)
        # Since we're using a file, filter logs out of the stderr handler.
        _STDERR_HANDLER.setLevel(logging.CRITICAL + 1)

    for log_level in _LOG_LEVELS:
        name = colorize(log_level.color, log_level.ascii, color)
        logging.addLevelName(log_level.level, name)
