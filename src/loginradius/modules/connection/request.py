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

from dataclasses import dataclass
from typing import Dict, Any, Optional
from urllib.parse import quote

from requests import Request, PreparedRequest
from requests.structures import CaseInsensitiveDict
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url


def is_absolute_uri(value: Optional[str]) -> bool:
    """True when value carries both a scheme and a host"""
    if not value or not value.strip():
        return False
    try:
        parsed = parse_url(value.strip())
    except LocationParseError:
        return False
    return bool(parsed.scheme and parsed.host)


@dataclass
class ProxyCredentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"ProxyCredentials(username={self.username!r}, password='***')"


@dataclass
class WebProxy:
    """Proxy server a request is tunnelled through"""

    address: str
    credentials: Optional[ProxyCredentials] = None

    @property
    def url(self) -> str:
        """Proxy address with the credentials embedded, as requests expects"""
        if self.credentials is None:
            return self.address
        auth = (
            f"{quote(self.credentials.username, safe='')}"
            f":{quote(self.credentials.password, safe='')}"
        )
        return parse_url(self.address)._replace(auth=auth).url


class ConnectionRequest:
    """
    Configured HTTP request that has not been sent yet.

    Built by ConnectionManager.build_request(); the caller owns it and may
    still set method, params and body before sending.
    """

    EXPECT_HEADER = "Expect"

    def __init__(
        self,
        url: str,
        timeout: int,
        method: str = "GET",
    ):
        self.url = url
        self.method = method.upper()
        self.timeout = timeout
        self.proxy: Optional[WebProxy] = None
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self.params: Dict[str, Any] = {}
        self.json: Any = None
        self.data: Any = None
        self.expect_100_continue = True

    def __repr__(self) -> str:
        return (
            f"<ConnectionRequest [{self.method}] {self.url} "
            f"timeout={self.timeout}ms proxy={'yes' if self.proxy else 'no'}>"
        )

    @property
    def timeout_seconds(self) -> Optional[float]:
        """Timeout for requests; None (wait forever) when not positive"""
        if self.timeout <= 0:
            return None
        return self.timeout / 1000.0

    @property
    def proxies(self) -> Dict[str, str]:
        if self.proxy is None:
            return {}
        proxy_url = self.proxy.url
        return {"http": proxy_url, "https": proxy_url}

    def to_request(self) -> Request:
        return Request(
            method=self.method,
            url=self.url,
            headers=dict(self.headers),
            params=self.params or None,
            json=self.json,
            data=self.data,
        )

    @classmethod
    def strip_expect_header(cls, prepared: PreparedRequest) -> None:
        expect = prepared.headers.get(cls.EXPECT_HEADER, "")
        if expect.lower() == "100-continue":
            del prepared.headers[cls.EXPECT_HEADER]

    def prepare(self) -> PreparedRequest:
        prepared = self.to_request().prepare()
        if not self.expect_100_continue:
            self.strip_expect_header(prepared)
        return prepared


__all__ = [
    "is_absolute_uri",
    "ProxyCredentials",
    "WebProxy",
    "ConnectionRequest",
]
