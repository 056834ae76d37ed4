"""
Interval ⇄ JSON

Сериализация проходит оба уровня проверки:
1. JSON Schema контракт (interval.json) — форма данных
2. Pydantic модель (IntervalModel) — согласованность kind/value
"""

from typing import Any, Callable, Dict, Optional

from src.core.contracts.validators import validate_interval
from src.core.domain.interval_model import IntervalModel
from src.core.intervals.interval import Interval


def interval_to_dict(interval: Interval) -> Dict[str, Any]:
    """
    Сериализация интервала в JSON-совместимый dict.

    Точки сериализуются в JSON-режиме Pydantic (datetime → ISO строка,
    Decimal → строка). Бесконечность задаётся видом границы, поэтому
    точки float inf и nan не сериализуются.

    Raises:
        pydantic.ValidationError: Если точка границы float inf или nan
        jsonschema.ValidationError: Если точки не представимы числом или
            строкой либо нижняя и верхняя точки разных JSON типов
    """
    data = IntervalModel.from_interval(interval).model_dump(mode="json")
    validate_interval(data)
    return data


def interval_from_dict(
    data: Dict[str, Any],
    convert: Optional[Callable[[Any], Any]] = None,
) -> Interval:
    """
    Десериализация интервала.

    Args:
        data: Данные по контракту interval.json
        convert: Преобразование точек (например, datetime.fromisoformat)

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если kind и value несогласованы
    """
    validate_interval(data)
    return IntervalModel.model_validate(data).to_interval(convert)
