"""Tests for ContextVar-based scan configuration."""

import re
from threading import Thread

import pytest

from scanners import CalcScanner
from lexis import (
    ScanConfig,
    ScanError,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.flags == re.IGNORECASE | re.UNICODE
        assert config.strict is False
        assert config.source_file is None

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"strict": True, "source_file": "a.dsl", "bogus": 1})
        assert config.strict is True
        assert config.source_file == "a.dsl"


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(strict=True))
        assert get_scan_config().strict is True

    def test_reset(self) -> None:
        set_scan_config(ScanConfig(strict=True))
        reset_scan_config()
        assert get_scan_config().strict is False

    def test_context_manager_restores(self) -> None:
        with scan_config_context(ScanConfig(source_file="inner.dsl")):
            assert get_scan_config().source_file == "inner.dsl"
        assert get_scan_config().source_file is None

    def test_context_manager_restores_on_error(
        self, calc: CalcScanner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Previous config comes back even when scanning raises."""

        def failing(text):
            raise ValueError("engine failure")
            yield  # pragma: no cover

        monkeypatch.setattr(calc, "iter_candidates", failing)

        with pytest.raises(ScanError):
            with scan_config_context(ScanConfig(strict=True)):
                calc.tokenize("1")

        assert get_scan_config().strict is False


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_thread_isolation(self) -> None:
        seen: dict[str, bool] = {}

        def worker() -> None:
            set_scan_config(ScanConfig(strict=True))
            seen["worker"] = get_scan_config().strict

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen["worker"] is True
        assert get_scan_config().strict is False
