"""Tests for ContextVar-based processing configuration."""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest

from linemark.config import (
    DEFAULT_ENCODING,
    ProcessConfig,
    get_process_config,
    process_config_context,
    reset_process_config,
    set_process_config,
)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_process_config()


class TestProcessConfig:
    """ProcessConfig dataclass."""

    def test_defaults(self) -> None:
        config = ProcessConfig()
        assert config.encoding == DEFAULT_ENCODING == "UTF-8"
        assert config.errors == "strict"

    def test_frozen(self) -> None:
        config = ProcessConfig()
        with pytest.raises(FrozenInstanceError):
            config.encoding = "latin-1"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ProcessConfig.from_dict({"encoding": "cp1252", "plugins": ["x"]})
        assert config == ProcessConfig(encoding="cp1252")

    def test_from_empty_dict(self) -> None:
        assert ProcessConfig.from_dict({}) == ProcessConfig()


class TestContextVar:
    """Getting, setting and scoping the active config."""

    def test_default_active(self) -> None:
        assert get_process_config() == ProcessConfig()

    def test_set_and_reset(self) -> None:
        set_process_config(ProcessConfig(encoding="latin-1"))
        assert get_process_config().encoding == "latin-1"
        reset_process_config()
        assert get_process_config().encoding == DEFAULT_ENCODING

    def test_context_restores_previous(self) -> None:
        set_process_config(ProcessConfig(encoding="cp1252"))
        with process_config_context(ProcessConfig(encoding="latin-1")):
            assert get_process_config().encoding == "latin-1"
        assert get_process_config().encoding == "cp1252"

    def test_context_restores_on_error(self) -> None:
        with pytest.raises(ValueError):
            with process_config_context(ProcessConfig(encoding="latin-1")):
                raise ValueError("boom")
        assert get_process_config().encoding == DEFAULT_ENCODING

    def test_threads_do_not_share_config(self) -> None:
        barrier = threading.Barrier(4)

        def worker(encoding: str) -> str:
            with process_config_context(ProcessConfig(encoding=encoding)):
                barrier.wait()
                return get_process_config().encoding

        encodings = ["utf-8", "latin-1", "cp1252", "utf-16"]
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(worker, encodings))
        assert results == encodings
        assert get_process_config().encoding == DEFAULT_ENCODING
