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

import os
import logging
import tempfile
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional

from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url


def redact_url(url) -> str:
    """URL without query string and userinfo; LoginRadius passes apikey/apisecret in the query"""
    try:
        parsed = parse_url(str(url))
    except LocationParseError:
        return "<unparsable url>"
    return parsed._replace(auth=None, query=None, fragment=None).url


class PerformanceLogger:
    """Logger for operations, timings and errors of the SDK"""

    def __init__(
        self,
        name: str = "loginradius",
        log_dir: Optional[str] = None,
        debug_mode: Optional[bool] = None,
    ):
        self.name = name
        self.log_dir = (
            log_dir or os.getenv("LOGINRADIUS_LOG_DIR") or self._get_default_log_dir()
        )
        self.debug_mode = (
            debug_mode
            if debug_mode is not None
            else os.getenv("LOGINRADIUS_DEBUG", "false").lower() == "true"
        )
        self._ensure_log_dir()
        self._setup_loggers()

    def _get_default_log_dir(self) -> str:
        return os.path.join(tempfile.gettempdir(), "loginradius", "logs")

    def _ensure_log_dir(self):
        os.makedirs(self.log_dir, exist_ok=True)

    def _setup_loggers(self):
        self.main_logger = self._create_logger(
            name=f"{self.name}_main", filename="loginradius_main.log", level=logging.INFO
        )

        self.performance_logger = self._create_logger(
            name=f"{self.name}_performance",
            filename="loginradius_performance.log",
            level=logging.INFO,
        )

        self.error_logger = self._create_logger(
            name=f"{self.name}_error", filename="loginradius_error.log", level=logging.ERROR
        )

        # Silent unless debug mode is on
        self.debug_logger = self._create_logger(
            name=f"{self.name}_debug",
            filename="loginradius_debug.log",
            level=logging.DEBUG if self.debug_mode else logging.INFO,
        )

    def _create_logger(self, name: str, filename: str, level: int) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False

        # Re-created on every PerformanceLogger, release the old file handles first
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        log_file = os.path.join(self.log_dir, filename)

        # 10MB, 5 files
        handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8", delay=True
        )

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)

        # Console: everything in debug mode, otherwise errors only
        if self.debug_mode or level == logging.ERROR:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        return logger

    @staticmethod
    def _format(prefix: str, **kwargs) -> str:
        if kwargs:
            details = " | ".join(
                [f"{k}={redact_url(v) if k == 'url' else v}" for k, v in kwargs.items()]
            )
            prefix += f" | {details}"
        return prefix

    def log_performance(self, operation: str, duration: float, **kwargs):
        """Timing log"""
        self.performance_logger.info(
            self._format(f"PERF: {operation} - {duration:.4f}s", **kwargs)
        )

    def log_operation(self, operation: str, **kwargs):
        """Operation log"""
        self.main_logger.info(self._format(f"OP: {operation}", **kwargs))

    def log_error(self, error: str, **kwargs):
        """Error log"""
        self.error_logger.error(self._format(f"ERROR: {error}", **kwargs))

    def log_debug(self, message: str, **kwargs):
        """Debug log"""
        if not self.debug_logger.isEnabledFor(logging.DEBUG):
            return
        self.debug_logger.debug(self._format(message, **kwargs))


_logger_instance: Optional[PerformanceLogger] = None
_logger_lock = threading.Lock()


def get_logger(debug_mode: Optional[bool] = None) -> PerformanceLogger:
    """Returns the shared logger, rebuilding it when debug_mode is given"""
    global _logger_instance
    if _logger_instance is not None and debug_mode is None:
        return _logger_instance
    with _logger_lock:
        if _logger_instance is None or debug_mode is not None:
            _logger_instance = PerformanceLogger(debug_mode=debug_mode)
        return _logger_instance


def reset_logger():
    """Drops the shared logger (for tests)"""
    global _logger_instance
    with _logger_lock:
        _logger_instance = None


__all__ = ["PerformanceLogger", "get_logger", "reset_logger", "redact_url"]
