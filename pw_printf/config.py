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
"""YAML configuration for the pw_printf command line tool.

Settings are read from the ``pw_printf`` section of each file:

::

   pw_printf:
     buffer_size: 32
     show_count: true
     log_level: debug

A file may instead hold the settings at the top level with
``config_title: pw_printf``.
"""

import enum
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

_LOG = logging.getLogger(__name__)

CONFIG_TITLE = 'pw_printf'
ENVIRONMENT_VAR = 'PW_PRINTF_CONFIG_FILE'
PROJECT_FILE = Path('.pw_printf.yaml')
USER_FILE = Path('~/.pw_printf.yaml')

DEFAULT_CONFIG: Dict[str, Any] = {
    'buffer_size': None,
    'show_count': False,
    'log_level': 'info',
}


class MissingConfigTitle(Exception):
    """Exception for when an existing YAML file is missing config_title."""


class Stage(enum.Enum):
    DEFAULT = 0
    PROJECT_FILE = 1
    USER_FILE = 2
    ENVIRONMENT_VAR_FILE = 3
    OUT_OF_BAND = 4


class PrintfConfig:
    """Loads pw_printf settings from YAML files in order of precedence.

    1. ``project_file``
    2. ``user_file``

    If the environment variable names a file, it replaces both.
    """

    def __init__(
        self,
        project_file: Optional[Path] = PROJECT_FILE,
        user_file: Optional[Path] = USER_FILE,
        environment_var: Optional[str] = ENVIRONMENT_VAR,
    ) -> None:
        self.reset_config()

        for path, stage in (
            (project_file, Stage.PROJECT_FILE),
            (user_file, Stage.USER_FILE),
        ):
            if path is not None:
                self.load_config_file(_expand(path), stage=stage)

        if environment_var is None:
            return

        environment_config = os.environ.get(environment_var)
        if environment_config:
            env_file_path = Path(environment_config)
            if not env_file_path.is_file():
                raise FileNotFoundError(
                    f'Cannot load config file: {env_file_path}'
                )
            self.reset_config()
            self.load_config_file(
                env_file_path, stage=Stage.ENVIRONMENT_VAR_FILE
            )

    def reset_config(self) -> None:
        self._config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    def _update_config(self, cfg: Optional[Dict[str, Any]], stage: Stage):
        for key, value in (cfg or {}).items():
            if key == 'config_title':
                continue
            if key not in DEFAULT_CONFIG:
                _LOG.warning('Ignoring unknown %s setting %r', stage.name, key)
                continue
            self._config[key] = value

    def load_config_file(
        self, file_path: Path, stage: Stage = Stage.OUT_OF_BAND
    ) -> None:
        """Load a config file and extract the pw_printf section."""
        if not file_path.is_file():
            return

        _LOG.debug('Loading %s config from %s', stage.name, file_path)
        cfgs: List[Any] = list(yaml.safe_load_all(file_path.read_text()))

        for cfg in cfgs:
            if cfg is None:
                continue
            if CONFIG_TITLE in cfg:
                self._update_config(cfg[CONFIG_TITLE], stage)
            elif cfg.get('config_title') == CONFIG_TITLE:
                self._update_config(cfg, stage)
            else:
                raise MissingConfigTitle(
                    f'\n\nThe config file "{file_path}" is missing the '
                    f'expected "config_title: {CONFIG_TITLE}" setting.'
                )

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @property
    def buffer_size(self) -> Optional[int]:
        size = self._config['buffer_size']
        return None if size is None else int(size)

    @property
    def show_count(self) -> bool:
        return bool(self._config['show_count'])

    @property
    def log_level(self) -> int:
        level = self._config['log_level']
        if isinstance(level, int):
            return level
        return logging.getLevelName(str(level).upper())


def _expand(path: Path) -> Path:
    return Path(os.path.expandvars(str(path.expanduser())))
