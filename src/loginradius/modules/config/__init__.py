# -*- coding: utf-8 -*-
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import os
import re
import threading
from typing import Dict, Any, Mapping, Optional

import yaml

from ...infrastructure.exceptions import ConfigurationError
from ...resources import get_default_config


HTTP_CONNECTION_TIMEOUT_CONFIG = "connectionTimeout"
HTTP_PROXY_ADDRESS_CONFIG = "proxyAddress"
HTTP_PROXY_CREDENTIAL_CONFIG = "proxyCredentials"
API_KEY_CONFIG = "apiKey"
API_SECRET_CONFIG = "apiSecret"
API_DOMAIN_CONFIG = "apiDomain"

# Used when even the configured default timeout is not an integer
DEFAULT_CONNECTION_TIMEOUT = 360000

_INT32_RE = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_INT32_MIN, _INT32_MAX = -2 ** 31, 2 ** 31 - 1

KNOWN_KEYS = (
    HTTP_CONNECTION_TIMEOUT_CONFIG,
    HTTP_PROXY_ADDRESS_CONFIG,
    HTTP_PROXY_CREDENTIAL_CONFIG,
    API_KEY_CONFIG,
    API_SECRET_CONFIG,
    API_DOMAIN_CONFIG,
)


def parse_int32(value: Any) -> Optional[int]:
    """
    Parses a 32-bit signed integer setting

    ASCII digits with optional sign and surrounding whitespace only; anything
    else (underscores, non-ASCII digits, out of range) gives None.
    """
    if value is None:
        return None
    text = str(value)
    if not _INT32_RE.fullmatch(text):
        return None
    number = int(text)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


class ConfigManager:
    """
    Process-wide SDK configuration.

    Layers, lowest to highest priority: packaged defaults, the YAML file
    named by LOGINRADIUS_CONFIG, LOGINRADIUS_<KEY> environment variables,
    runtime overrides from set()/update(). Every value is a string.
    """

    ENV_PREFIX = "LOGINRADIUS_"
    CONFIG_FILE_ENV = "LOGINRADIUS_CONFIG"

    def __init__(
        self,
        config_file: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        environ = os.environ if environ is None else environ
        self._lock = threading.Lock()

        self._defaults = self._load_yaml(get_default_config())

        self._file_values: Dict[str, str] = {}
        config_file = config_file or environ.get(self.CONFIG_FILE_ENV)
        if config_file:
            self._file_values = self._load_yaml(config_file)

        self._env_values = self._read_environment(environ)
        self._overrides: Dict[str, str] = {}

    @staticmethod
    def _load_yaml(path: str) -> Dict[str, str]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Config file could not be read: {path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Config file is not valid YAML: {path}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")

        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _read_environment(self, environ: Mapping[str, str]) -> Dict[str, str]:
        values = {}
        for key in KNOWN_KEYS:
            env_name = f"{self.ENV_PREFIX}{key.upper()}"
            if env_name in environ:
                values[key] = environ[env_name]
        return values

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        # Lock-free; single dict reads are atomic and writers replace values only
        for layer in (self._overrides, self._env_values, self._file_values, self._defaults):
            value = layer.get(key)
            if value is not None:
                return value
        return default

    def get_default(self, key: str) -> Optional[str]:
        """Process-wide value of key, the fallback for per-request config"""
        return self.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            if value is None:
                self._overrides.pop(key, None)
            else:
                self._overrides[key] = str(value)

    def update(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def as_dict(self) -> Dict[str, str]:
        """Merged copy of every layer"""
        with self._lock:
            merged: Dict[str, str] = {}
            for layer in (self._defaults, self._file_values, self._env_values, self._overrides):
                merged.update(layer)
            return merged

    def default_connection_timeout(self) -> int:
        timeout = parse_int32(self.get_default(HTTP_CONNECTION_TIMEOUT_CONFIG))
        if timeout is None:
            return DEFAULT_CONNECTION_TIMEOUT
        return timeout


_config_instance: Optional[ConfigManager] = None
_config_lock = threading.Lock()


def get_config_manager() -> ConfigManager:
    """Shared ConfigManager, built on first use"""
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = ConfigManager()
    return _config_instance


def reset_config_manager():
    """Drops the shared ConfigManager (for tests)"""
    global _config_instance
    with _config_lock:
        _config_instance = None


__all__ = [
    "HTTP_CONNECTION_TIMEOUT_CONFIG",
    "HTTP_PROXY_ADDRESS_CONFIG",
    "HTTP_PROXY_CREDENTIAL_CONFIG",
    "API_KEY_CONFIG",
    "API_SECRET_CONFIG",
    "API_DOMAIN_CONFIG",
    "DEFAULT_CONNECTION_TIMEOUT",
    "parse_int32",
    "KNOWN_KEYS",
    "ConfigManager",
    "get_config_manager",
    "reset_config_manager",
]
