"""
Configuration for the credit card savings calculator.

All values are loaded from environment variables with sensible defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List

VALID_MODES = ("auto", "light", "dark")


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.getenv(key, default)


def _get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.getenv(key, default))


def _get_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    return int(os.getenv(key, default))


def _get_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable ("true" is the only truthy value)."""
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() == "true"


def _get_list(key: str, default: str) -> List[str]:
    """Get comma-separated list from environment variable."""
    return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]


def _get_mode(key: str, default: str) -> str:
    """Get theme mode; unknown values fall back to auto."""
    mode = os.getenv(key, default).strip().lower()
    return mode if mode in VALID_MODES else "auto"


@dataclass
class HostConfig:
    """Settings the embedding page passes to the calculator."""

    mode: str = field(default_factory=lambda: _get_mode("CALC_MODE", "auto"))
    transparent_background: bool = field(
        default_factory=lambda: _get_bool("CALC_TRANSPARENT_BACKGROUND", False)
    )
    version: str = field(default_factory=lambda: _get_str("CALC_VERSION", "1.0.0"))
    source: str = field(default_factory=lambda: _get_str("CALC_SOURCE", "unknown"))


@dataclass
class CalculatorConfig:
    """Defaults and presentation caps for the calculator inputs."""

    default_time_period: int = field(
        default_factory=lambda: max(0, _get_int("CALC_DEFAULT_TIME_PERIOD", 10))
    )
    default_return_rate: float = field(
        default_factory=lambda: max(0.0, _get_float("CALC_DEFAULT_RETURN_RATE", 9.0))
    )
    # UI cap only; the core accepts any non-negative APR
    apr_ceiling: float = field(default_factory=lambda: _get_float("CALC_APR_CEILING", 100.0))


@dataclass
class ServerConfig:
    """HTTP and logging settings."""

    cors_origins: List[str] = field(
        default_factory=lambda: _get_list(
            "CALC_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
        )
    )
    log_level: str = field(default_factory=lambda: _get_str("CALC_LOG_LEVEL", "INFO").upper())


# Global config instances (lazy loaded)
_host_config = None
_calculator_config = None
_server_config = None


def get_host_config() -> HostConfig:
    """Get host page configuration."""
    global _host_config
    if _host_config is None:
        _host_config = HostConfig()
    return _host_config


def get_calculator_config() -> CalculatorConfig:
    """Get calculator defaults."""
    global _calculator_config
    if _calculator_config is None:
        _calculator_config = CalculatorConfig()
    return _calculator_config


def get_server_config() -> ServerConfig:
    """Get server configuration."""
    global _server_config
    if _server_config is None:
        _server_config = ServerConfig()
    return _server_config


def reload_config():
    """Force reload of all configuration from environment variables."""
    global _host_config, _calculator_config, _server_config
    _host_config = HostConfig()
    _calculator_config = CalculatorConfig()
    _server_config = ServerConfig()
