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

"""
LoginRadius SDK exception classes
"""

from typing import Dict, Any, Optional


class LoginRadiusException(Exception):
    """LoginRadius base exception"""

    def __init__(self, message: str, error_code: Optional[int] = None,
                 description: Optional[str] = None):
        self.error_code = error_code
        self.description = description
        super().__init__(message)


class ConfigurationError(LoginRadiusException):
    """Invalid SDK configuration (bad request URI, unreadable config file)"""
    pass


class LoginRadiusAPIError(LoginRadiusException):
    """Error returned by the LoginRadius API"""

    def __init__(self, message: str, error_code: Optional[int] = None,
                 description: Optional[str] = None,
                 status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, error_code, description)


class APIValidationError(LoginRadiusAPIError):
    """Request parameters rejected by the API (400)"""
    pass


class APIAuthenticationError(LoginRadiusAPIError):
    """API key, secret or access token rejected (401)"""
    pass


class APIAuthorizationError(LoginRadiusAPIError):
    """Operation not allowed for this API key (403)"""
    pass


class APINotFoundError(LoginRadiusAPIError):
    """Endpoint or resource not found (404)"""
    pass


class APIRateLimitError(LoginRadiusAPIError):
    """Too many requests (429)"""
    pass


class APIServerError(LoginRadiusAPIError):
    """API server error (500+)"""
    pass


_STATUS_EXCEPTIONS = {
    400: (APIValidationError, "Invalid request parameters"),
    401: (APIAuthenticationError, "Authentication failed"),
    403: (APIAuthorizationError, "Access denied"),
    404: (APINotFoundError, "Endpoint not found"),
    429: (APIRateLimitError, "Rate limit exceeded"),
}


def parse_api_error(status_code: int, error_data: Dict[str, Any]) -> LoginRadiusAPIError:
    """
    Builds the matching exception from a LoginRadius error body

    Args:
        status_code: HTTP status code
        error_data: Error body, e.g. {"ErrorCode": 905, "Message": ..., "Description": ...}

    Returns:
        LoginRadiusAPIError: Matching exception class
    """
    error_code = error_data.get("ErrorCode")
    message = error_data.get("Message") or "Unknown error"
    description = error_data.get("Description")

    exception_class = _exception_class_for(status_code)
    text = f"[{error_code}] {message}" if error_code is not None else message

    return exception_class(
        text,
        error_code=error_code,
        description=description,
        status_code=status_code,
    )


def _exception_class_for(status_code: int):
    if status_code in _STATUS_EXCEPTIONS:
        return _STATUS_EXCEPTIONS[status_code][0]
    if status_code >= 500:
        return APIServerError
    return LoginRadiusAPIError


def create_exception_from_status_code(
    status_code: int,
    error_data: Optional[Dict[str, Any]] = None,
    error_text: Optional[str] = None
) -> LoginRadiusAPIError:
    """
    Builds the matching exception for an HTTP status code

    Args:
        status_code: HTTP status code
        error_data: LoginRadius error body (optional)
        error_text: Error message (optional)

    Returns:
        LoginRadiusAPIError: Matching exception class
    """
    if error_data:
        return parse_api_error(status_code, error_data)

    if status_code in _STATUS_EXCEPTIONS:
        exception_class, default_text = _STATUS_EXCEPTIONS[status_code]
    elif status_code >= 500:
        exception_class, default_text = APIServerError, "Server error"
    else:
        exception_class = LoginRadiusAPIError
        default_text = f"Unknown error (HTTP {status_code})"

    return exception_class(error_text or default_text, status_code=status_code)
