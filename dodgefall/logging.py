"""
Dodgefall logging.

Small per-module loggers with levels configurable from the environment,
so a noisy module can be turned up without touching the others.

Usage:
    from dodgefall.logging import get_logger

    log = get_logger('simulation')
    log.debug("Spawned object at x=%.1f", x)
    log.info("Round started")

Configuration:
    Environment variables:
        DODGEFALL_LOG_LEVEL=DEBUG        # Global default level
        DODGEFALL_LOG_SIMULATION=DEBUG   # Module-specific level
        DODGEFALL_LOG_SKINS=ERROR

    Or programmatically:
        from dodgefall.logging import configure_logging
        configure_logging(level='DEBUG', modules={'skins': 'INFO'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional, TextIO


ENV_PREFIX = 'DODGEFALL_LOG_'


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame chatter
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'stream': None,  # None = stdout for < ERROR, stderr for >= ERROR
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, defaulting to INFO for unknown names."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
        stream: Write every record to this stream instead of stdout/stderr
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)

    _config['stream'] = stream


def _load_env_config() -> None:
    """Load levels from DODGEFALL_LOG_* environment variables."""
    level_key = ENV_PREFIX + 'LEVEL'
    if level_key in os.environ:
        _config['default_level'] = _level_from_string(os.environ[level_key])

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key != level_key:
            module_name = key[len(ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class DodgefallLogger:
    """Logger for a specific module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        stream = _config['stream']
        if stream is None:
            stream = sys.stderr if level >= LogLevel.ERROR else sys.stdout
        print(_format_message(self.module, level_name, msg), file=stream)

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR level followed by the current traceback."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

        tb = traceback.format_exc()
        if tb and tb.strip() != 'NoneType: None':
            for line in tb.strip().split('\n'):
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> DodgefallLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'simulation', 'skins', 'input')

    Returns:
        DodgefallLogger instance for the module
    """
    return DodgefallLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
