# -*- coding: utf-8 -*-
from .modules.version import __version__, __appname__, __fullname__
from .modules.config import get_config_manager
from .modules.connection import (
    ConnectionManager,
    ConnectionRequest,
    WebProxy,
    ProxyCredentials,
    get_connection_manager,
)
from .modules.http_client import HTTPClient
from .infrastructure.exceptions import (
    LoginRadiusException,
    ConfigurationError,
    LoginRadiusAPIError,
)
from .models import LoginRadiusLanguage, RemoveLanguage, PostResponse
from typing import Any, Dict, Optional


def set_config(**values: Any) -> None:
    """Set global SDK settings (apiKey, apiSecret, connectionTimeout, proxyAddress, ...)"""
    get_config_manager().update(values)


def get_config() -> Dict[str, str]:
    """Copy of the merged SDK settings"""
    return get_config_manager().as_dict()


def build_request(url: str, headers: Optional[Dict[str, str]] = None) -> ConnectionRequest:
    """Build a request with the global settings through the shared ConnectionManager"""
    return get_connection_manager().build_request(get_config(), url, headers)


__all__ = [
    "__version__",
    "__appname__",
    "__fullname__",
    "set_config",
    "get_config",
    "build_request",
    "get_config_manager",
    "get_connection_manager",
    "ConnectionManager",
    "ConnectionRequest",
    "WebProxy",
    "ProxyCredentials",
    "HTTPClient",
    "LoginRadiusException",
    "ConfigurationError",
    "LoginRadiusAPIError",
    "LoginRadiusLanguage",
    "RemoveLanguage",
    "PostResponse",
]
