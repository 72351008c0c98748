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

import threading
from typing import Mapping, Optional

from ...infrastructure.exceptions import ConfigurationError
from ..config import (
    HTTP_CONNECTION_TIMEOUT_CONFIG,
    HTTP_PROXY_ADDRESS_CONFIG,
    HTTP_PROXY_CREDENTIAL_CONFIG,
    ConfigManager,
    get_config_manager,
    parse_int32,
)
from ..logger import get_logger
from .request import ConnectionRequest, ProxyCredentials, WebProxy, is_absolute_uri


class ConnectionManager:
    """
    Builds the ConnectionRequest objects used by the API calls.

    Use get_connection_manager() (or ConnectionManager.instance()) rather
    than the constructor; the process shares one instance.
    """

    _instance: Optional[ConnectionManager] = None
    _instance_lock = threading.Lock()

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self._config_manager = config_manager
        self.logger = get_logger()

    @classmethod
    def instance(cls) -> ConnectionManager:
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @property
    def config_manager(self) -> ConfigManager:
        return self._config_manager or get_config_manager()

    def build_request(
        self,
        config: Mapping[str, str],
        url: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ConnectionRequest:
        """
        Create and configure a request

        Args:
            config: Config properties (connectionTimeout, proxyAddress, proxyCredentials)
            url: Absolute URL to connect to
            headers: Extra request headers

        Returns:
            ConnectionRequest: Configured, not yet sent request

        Raises:
            ConfigurationError: url is not an absolute URI
        """
        if not is_absolute_uri(url):
            raise ConfigurationError(f"Invalid URI: {url}")

        request = ConnectionRequest(url, timeout=self._resolve_timeout(config))

        # Tunnel the request through a proxy server
        request.proxy = self._resolve_proxy(config)

        if headers:
            for key, value in headers.items():
                request.headers[key] = value

        # Expect: 100-continue is not supported by the API and only adds a round trip
        request.expect_100_continue = False

        self.logger.log_debug(
            "connection_request_built",
            url=url,
            timeout=request.timeout,
            proxy=request.proxy is not None,
        )
        return request

    def _resolve_timeout(self, config: Mapping[str, str]) -> int:
        timeout = parse_int32(config.get(HTTP_CONNECTION_TIMEOUT_CONFIG))
        if timeout is None:
            return self.config_manager.default_connection_timeout()
        return timeout

    @staticmethod
    def _resolve_proxy(config: Mapping[str, str]) -> Optional[WebProxy]:
        address = config.get(HTTP_PROXY_ADDRESS_CONFIG)
        if not address or not address.strip() or not is_absolute_uri(address):
            return None

        proxy = WebProxy(address=address.strip())

        credentials = config.get(HTTP_PROXY_CREDENTIAL_CONFIG)
        if credentials is not None:
            details = credentials.split(":")
            if len(details) == 2:
                proxy.credentials = ProxyCredentials(details[0], details[1])

        return proxy


def get_connection_manager() -> ConnectionManager:
    """Accessor for the shared ConnectionManager"""
    return ConnectionManager.instance()


__all__ = [
    "ConnectionManager",
    "ConnectionRequest",
    "WebProxy",
    "ProxyCredentials",
    "get_connection_manager",
]
