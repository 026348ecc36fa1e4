"""
Модульные тесты для src/__init__.py
Тестирует метаданные, публичный API, логирование и загрузку конфигурации.
"""

import json
import logging
import re
from pathlib import Path
from unittest import mock

import pytest

import src as barcode_cards


class TestVersionMetadata:
    """Тестирование метаданных версии."""

    def test_version_format(self) -> None:
        """Проверить, что __version__ следует семантическому версионированию."""
        assert re.match(r"^\d+\.\d+\.\d+$", barcode_cards.__version__)

    def test_version_components(self) -> None:
        """Проверить, что компоненты версии соответствуют __version__."""
        expected = (
            f"{barcode_cards.VERSION_MAJOR}."
            f"{barcode_cards.VERSION_MINOR}."
            f"{barcode_cards.VERSION_PATCH}"
        )
        assert barcode_cards.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for name in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(barcode_cards, name)
            assert isinstance(value, str) and value, f"{name} должен быть непустой строкой"


class TestPublicAPI:
    """Тестирование экспортов публичного API."""

    def test_all_exports_exist(self) -> None:
        for name in barcode_cards.__all__:
            assert hasattr(barcode_cards, name), f"Имя '{name}' из __all__ не существует в модуле"

    def test_no_duplicate_exports(self) -> None:
        assert len(barcode_cards.__all__) == len(set(barcode_cards.__all__))

    def test_encoders_exported(self) -> None:
        for name in ("encode_code39", "encode_code128", "encode_ean13", "encode_symbol"):
            assert name in barcode_cards.__all__

    def test_top_level_encode(self) -> None:
        desc = barcode_cards.encode_symbol("04210000526")
        assert desc.total_modules == 95
        assert desc.symbology is barcode_cards.Symbology.EAN13


class TestLogging:
    """Тестирование конфигурации логирования."""

    def test_get_logger_name_format(self) -> None:
        logger = barcode_cards.get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "barcode_cards.test_module"

    def test_get_logger_with_qualified_name(self) -> None:
        logger = barcode_cards.get_logger("barcode_cards.dispatch")
        assert logger.name == "barcode_cards.dispatch"

    def test_get_logger_with_main(self) -> None:
        assert barcode_cards.get_logger("__main__").name == "barcode_cards.main"

    def test_package_logger_configured(self) -> None:
        root_logger = logging.getLogger(barcode_cards.LOGGER_NAMESPACE)
        assert len(root_logger.handlers) >= 1
        assert root_logger.propagate is False

    def test_setup_is_idempotent(self) -> None:
        root_logger = logging.getLogger(barcode_cards.LOGGER_NAMESPACE)
        before = list(root_logger.handlers)
        barcode_cards._setup_logging()
        assert root_logger.handlers == before


class TestConfiguration:
    """Тестирование управления конфигурацией."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        config = barcode_cards.load_config(tmp_path / "nonexistent.json")
        assert config["display_width"] == 336
        assert config["max_modules"] == 165
        assert config["min_module_width"] == 2
        assert config["card_color"] == "#12D612"

    def test_merge_with_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"display_width": 480, "custom": 1}), encoding="utf-8")
        config = barcode_cards.load_config(path)
        assert config["display_width"] == 480
        assert config["custom"] == 1
        assert config["max_modules"] == 165

    def test_defaults_not_mutated(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text('{"max_modules": 1}', encoding="utf-8")
        barcode_cards.load_config(path)
        assert barcode_cards.load_config(tmp_path / "missing.json")["max_modules"] == 165

    @pytest.mark.parametrize("content", ["{invalid json", '["not", "a", "dict"]'])
    def test_bad_file_falls_back(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "config.json"
        path.write_text(content, encoding="utf-8")
        config = barcode_cards.load_config(path)
        assert config["display_width"] == 336

    def test_bad_file_logs_warning(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "config.json"
        path.write_text("{invalid json", encoding="utf-8")
        logger = logging.getLogger("barcode_cards.src")
        logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.WARNING, logger="barcode_cards.src"):
                barcode_cards.load_config(path)
        finally:
            logger.removeHandler(caplog.handler)
        assert "Некорректный JSON" in caplog.text


class TestLogLevelFromEnvironment:
    """Уровень логирования из переменной окружения."""

    @pytest.fixture
    def scratch_namespace(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        # Fresh logger per case: _setup_logging skips a logger that has handlers
        name = f"barcode_cards_env_test_{tmp_path.name}"
        with mock.patch.object(barcode_cards, "LOGGER_NAMESPACE", name):
            yield logging.getLogger(name)
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    @pytest.mark.parametrize(
        "env_value,expected",
        [("DEBUG", logging.DEBUG), ("error", logging.ERROR), ("bogus", logging.INFO)],
    )
    def test_level(self, scratch_namespace: logging.Logger, env_value: str, expected: int) -> None:
        with mock.patch.dict("os.environ", {barcode_cards.LOG_LEVEL_ENV: env_value}):
            barcode_cards._setup_logging()
        assert scratch_namespace.level == expected
        assert (Path("logs") / "barcode_cards.log").exists()
