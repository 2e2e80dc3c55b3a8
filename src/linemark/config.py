"""ContextVar-based processing configuration for linemark.

The only configurable concern is how byte sources are decoded: the text
encoding and the codec error handler. Configuration is thread-local through a
ContextVar, so concurrent conversions on different threads never observe each
other's settings.

Usage:
    from linemark.config import ProcessConfig, process_config_context

    with process_config_context(ProcessConfig(encoding="latin-1")):
        html = process_file("legacy.txt")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

DEFAULT_ENCODING = "UTF-8"


@dataclass(frozen=True, slots=True)
class ProcessConfig:
    """Immutable processing configuration.

    Attributes:
        encoding: Text encoding used when the source is a file or byte stream
        errors: Codec error handler passed to the decoder ("strict" makes
            invalid bytes a read failure)

    """

    encoding: str = DEFAULT_ENCODING
    errors: str = "strict"

    @classmethod
    def from_dict(cls, config_dict: dict) -> ProcessConfig:
        """Create ProcessConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> ProcessConfig.from_dict({"encoding": "latin-1", "other": 1}).encoding
            'latin-1'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ProcessConfig = ProcessConfig()

_process_config: ContextVar[ProcessConfig] = ContextVar(
    "process_config",
    default=_DEFAULT_CONFIG,
)


def get_process_config() -> ProcessConfig:
    """Get the active configuration for this thread/context."""
    return _process_config.get()


def set_process_config(config: ProcessConfig) -> None:
    """Set the configuration for the current context."""
    _process_config.set(config)


def reset_process_config() -> None:
    """Reset the current context to the default configuration."""
    _process_config.set(_DEFAULT_CONFIG)


@contextmanager
def process_config_context(config: ProcessConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with process_config_context(ProcessConfig(encoding="latin-1")):
        ...     get_process_config().encoding
        'latin-1'
        >>> get_process_config().encoding
        'UTF-8'

    """
    token = _process_config.set(config)
    try:
        yield
    finally:
        _process_config.reset(token)


__all__ = [
    "DEFAULT_ENCODING",
    "ProcessConfig",
    "get_process_config",
    "process_config_context",
    "reset_process_config",
    "set_process_config",
]
