"""
Interval Contract Validation

Проверка JSON представления интервала (контракт interval.json) в два шага:
1. Форма данных по JSON Schema (jsonschema, Draft 2020-12)
2. Согласованность точек: конечные точки обеих границ одного JSON типа
   (оба числа или обе строки). Схема проверяет каждую границу отдельно и
   это правило выразить не может.

Схема лежит в schema/ рядом с модулем и загружается один раз на процесс.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"
INTERVAL_SCHEMA = "interval"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик схем из каталога с кэшем по имени"""

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Загрузка схемы <name>.json с meta-validation.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не является JSON Schema Draft 2020-12
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{name}.json"
        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        logger.debug("Loaded schema %s from %s", name, path)
        self._cache[name] = schema
        return schema


# =============================================================================
# INTERVAL VALIDATOR
# =============================================================================


class IntervalValidator:
    """
    Валидатор контракта interval.json.

    Из всех нарушений формы поднимается одно, наиболее релевантное
    (jsonschema.exceptions.best_match): для {"lower": {...}} без upper это
    отсутствие upper, а не вложенные ошибки lower.
    """

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or SchemaLoader()).load_schema(INTERVAL_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные нарушают схему или точки границ
                разных JSON типов
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error
        self._check_point_types(data)

    @staticmethod
    def _check_point_types(data: Dict[str, Any]) -> None:
        lower = data["lower"]["value"]
        upper = data["upper"]["value"]
        if lower is None or upper is None:
            return
        # Схема допускает только числа и строки
        if isinstance(lower, str) != isinstance(upper, str):
            raise ValidationError(
                f"lower and upper points must share a JSON type, got {lower!r} and {upper!r}",
                path=("upper", "value"),
                instance=data,
            )


@lru_cache(maxsize=1)
def _interval_validator() -> IntervalValidator:
    return IntervalValidator()


def validate_interval(data: Dict[str, Any]) -> None:
    """
    Валидация interval данных общим валидатором процесса.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _interval_validator().validate(data)
