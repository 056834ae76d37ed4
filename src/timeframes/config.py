"""Конфигурация относительных временных окон."""

from dataclasses import dataclass
from typing import Final

# Январь: финансовый год совпадает с календарным
FISCAL_YEAR_START_MONTH_DEFAULT: Final[int] = 1


@dataclass(frozen=True)
class TimeframeConfig:
    """Конфигурация разрешения временных окон.

    - fiscal_year_start_month: месяц начала финансового года (1..12).
      Влияет на start_of_year / end_of_year / year_to_date / yearly.
    """
    fiscal_year_start_month: int = FISCAL_YEAR_START_MONTH_DEFAULT

    def __post_init__(self) -> None:
        if not 1 <= self.fiscal_year_start_month <= 12:
            raise ValueError(
                f"fiscal_year_start_month must be in 1..12, got {self.fiscal_year_start_month}"
            )
