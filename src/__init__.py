"""
Пакет Barcode Cards
===================

Кодировщик одномерных штрихкодов для колоды карточек (скидочные, клубные,
библиотечные карты), отображаемых на небольшом экране.

Этот пакет предоставляет:
    - Code 39 (44 символа, старт/стоп ``*``)
    - Code 128 с автоматическим выбором подмножества B/C и контрольной суммой mod 103
    - EAN-13 с вычислением контрольной цифры и дополнением 11/12-значных кодов
    - Неизменяемое описание символа (SymbolDescriptor) для растеризации
    - Растеризацию через Pillow с проверкой бюджета экрана

Пример базового использования:
    >>> from src import encode_symbol, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> desc = encode_symbol("04210000526")
    >>> desc.total_modules
    95
    >>> logger.info("Закодировано %d модулей", desc.total_modules)

Пример рендеринга:
    >>> from src import Card, RasterRenderer
    >>>
    >>> renderer = RasterRenderer()
    >>> result = renderer.render_card(Card(name="Library", code="ABC-123"))
    >>> result.caption
    'ABC-123'

Пример конфигурации:
    >>> config = load_config()
    >>> print(f"Ширина экрана: {config['display_width']}")

Автор: Barcode Cards Development Team
Версия: 0.1.0
Лицензия: GPL-3.0-or-later
Python: 3.9+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "Barcode Cards Development Team"
__description__ = "1D barcode encoder (Code 39, Code 128, EAN-13) for card displays"
__license__ = "GPL-3.0-or-later"
__python_requires__ = ">=3.9"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 9):
    raise RuntimeError(
        f"Barcode Cards требует Python 3.9 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAMESPACE = "barcode_cards"
LOG_LEVEL_ENV = "BARCODE_CARDS_LOG_LEVEL"


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком для всех уровней
    - Форматом с временной меткой, уровнем, модулем и сообщением

    Уровень логирования задаётся переменной окружения
    BARCODE_CARDS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Идемпотентна: повторные вызовы не добавляют обработчики.
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Файловый обработчик (ротирующий) - все уровни
    try:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / "barcode_cards.log",
            maxBytes=1024 * 1024,  # 1 МБ
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except (OSError, PermissionError) as e:
        root_logger.warning(
            "Не удалось инициализировать файловое логирование: %s. "
            "Используется только консоль.",
            e,
        )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер модуля в пространстве имён ``barcode_cards``.

    Аргументы:
        module_name: Обычно ``__name__``.

    Возвращает:
        logging.Logger с именем ``barcode_cards.<module_name>``.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Символика: %s", "ean13")
    """
    if module_name.startswith(LOGGER_NAMESPACE):
        full_name = module_name
    elif module_name == "__main__":
        full_name = f"{LOGGER_NAMESPACE}.main"
    else:
        clean_name = module_name.lstrip(".")
        full_name = f"{LOGGER_NAMESPACE}.{clean_name}"

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

# Значения по умолчанию соответствуют экрану 336 px и пулу из 15 x 11 модулей
_DEFAULT_CONFIG: Dict[str, Any] = {
    "display_width": 336,
    "max_modules": 165,
    "min_module_width": 2,
    "quiet_zone_modules": 20,
    "bar_height": 120,
    "bar_color": "#000000",
    "card_color": "#12D612",
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из config.json или использовать значения по умолчанию.

    Ключи конфигурации:
        - display_width: int - Ширина экрана в пикселях
        - max_modules: int - Максимум модулей, которые способен отрисовать экран
        - min_module_width: int - Минимальная ширина модуля в пикселях
        - quiet_zone_modules: int - Модули тихой зоны, учитываемые при подборе ширины
        - bar_height: int - Высота штрихов в пикселях
        - bar_color: str - Цвет штрихов
        - card_color: str - Цвет фона карточки по умолчанию
        - log_level: str - Уровень логирования

    Аргументы:
        config_path: Путь к файлу. Если None, ищет 'config.json' в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("config.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config.update(user_config)
            logger.info("Конфигурация загружена из %s", config_path)

        except json.JSONDecodeError as e:
            logger.warning(
                "Некорректный JSON в %s: %s. Используются значения по умолчанию.",
                config_path,
                e,
            )
        except ValueError as e:
            logger.warning("%s. Используются значения по умолчанию.", e)
        except OSError as e:
            logger.warning(
                "Не удалось прочитать %s: %s. Используются значения по умолчанию.",
                config_path,
                e,
            )
    else:
        logger.debug("Файл конфигурации %s не найден, используются значения по умолчанию", config_path)

    return config


_setup_logging()

# =============================================================================
# ИМПОРТЫ ПУБЛИЧНОГО API
# =============================================================================
# Примечание: импорты размещены после функций утилит, чтобы логирование
# и load_config были доступны модулям пакета при их импорте.

from .barcodegen import (  # noqa: E402
    BarcodeGenError,
    InvalidDigitPairError,
    OutOfAlphabetError,
    RasterRenderer,
    RenderResult,
    RenderSettings,
    SymbolTooLongError,
    complete_ean13,
    compute_check_digit,
    encode_code39,
    encode_code128,
    encode_ean13,
    encode_many,
    encode_symbol,
    is_plausible_ean,
)
from .model.card import Card  # noqa: E402
from .model.enums import Symbology, SymbolErrorKind  # noqa: E402
from .model.symbol import Codeword, SymbolDescriptor  # noqa: E402

# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУБЛИЧНОГО API
# =============================================================================

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Модель
    "Card",
    "Codeword",
    "SymbolDescriptor",
    "Symbology",
    "SymbolErrorKind",
    # Кодировщики
    "compute_check_digit",
    "is_plausible_ean",
    "encode_code39",
    "encode_code128",
    "encode_ean13",
    "complete_ean13",
    "encode_symbol",
    "encode_many",
    # Рендеринг
    "RasterRenderer",
    "RenderResult",
    "RenderSettings",
    # Исключения
    "BarcodeGenError",
    "OutOfAlphabetError",
    "InvalidDigitPairError",
    "SymbolTooLongError",
]
