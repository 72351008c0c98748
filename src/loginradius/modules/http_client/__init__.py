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

import time
from typing import Dict, Any, Mapping, Optional

from requests import Session, Response
from requests.exceptions import RequestException

from ...infrastructure.exceptions import create_exception_from_status_code
from ..connection import ConnectionManager, ConnectionRequest, get_connection_manager
from ..config import get_config_manager
from ..logger import get_logger
from ..version import __fullname__


class HTTPClient:
    """
    Sends ConnectionRequest objects over a requests Session.
    Can be used as a context manager. Every request is sent once.
    """

    def __init__(
        self,
        connection_manager: Optional[ConnectionManager] = None,
        config: Optional[Mapping[str, str]] = None,
        verify: bool = True,
        allow_redirects: bool = True,
    ):
        """
        Create an HTTP client

        Args:
            connection_manager: Request factory (default: the shared instance)
            config: Per-client config (default: the global SDK config)
            verify: SSL certificate verification
            allow_redirects: Follow redirects
        """
        self.connection_manager = connection_manager or get_connection_manager()
        self._config = dict(config) if config is not None else None
        self.verify = verify
        self.allow_redirects = allow_redirects
        self.logger = get_logger()

        self._session: Optional[Session] = None

    @property
    def config(self) -> Dict[str, str]:
        if self._config is not None:
            return self._config
        return get_config_manager().as_dict()

    def _create_session(self) -> Session:
        session = Session()
        # Proxies come from the SDK config only
        session.trust_env = False
        session.headers.update({"User-Agent": __fullname__})
        return session

    def __enter__(self) -> HTTPClient:
        self._get_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get_session(self) -> Session:
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def send(self, request: ConnectionRequest) -> Response:
        """
        Send a configured request

        Args:
            request: Request built by ConnectionManager.build_request()

        Returns:
            Response object

        Raises:
            LoginRadiusAPIError: API answered with a non-2xx status
            RequestException: Transport failure
        """
        session = self._get_session()
        prepared = session.prepare_request(request.to_request())
        if not request.expect_100_continue:
            request.strip_expect_header(prepared)

        start_time = time.time()
        self.logger.log_operation(
            "http_request_start",
            method=request.method,
            url=request.url,
            timeout=request.timeout,
        )

        try:
            response = session.send(
                prepared,
                timeout=request.timeout_seconds,
                proxies=request.proxies,
                verify=self.verify,
                allow_redirects=self.allow_redirects,
            )
        except RequestException as e:
            self.logger.log_error(
                "http_request_exception",
                method=request.method,
                url=request.url,
                error_msg=str(e),
                duration=time.time() - start_time,
            )
            raise

        self.logger.log_performance(
            "http_request",
            time.time() - start_time,
            method=request.method,
            url=request.url,
            status_code=response.status_code,
            success=response.ok,
        )

        if not response.ok:
            self.logger.log_error(
                "http_request_error",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
                response_text=response.text[:500],
            )
            raise self._error_from_response(response)

        return response

    @staticmethod
    def _error_from_response(response: Response):
        error_data = None
        try:
            body = response.json()
            if isinstance(body, dict):
                error_data = body
        except ValueError:
            pass

        exception = create_exception_from_status_code(
            response.status_code,
            error_data=error_data,
            error_text=response.text[:500] or None,
        )
        exception.response = response
        return exception

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        data: Any = None,
    ) -> Response:
        connection = self.connection_manager.build_request(self.config, url, headers)
        connection.method = method.upper()
        connection.params = params or {}
        connection.json = json
        connection.data = data
        return self.send(connection)

    def get(self, url: str, **kwargs: Any) -> Response:
        """GET request"""
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> Response:
        """POST request"""
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> Response:
        """PUT request"""
        return self.request("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> Response:
        """DELETE request"""
        return self.request("DELETE", url, **kwargs)

    def close(self) -> None:
        if self._session:
            self._session.close()
            self._session = None


__all__ = ["HTTPClient"]
