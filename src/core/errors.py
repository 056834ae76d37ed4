"""
Exceptions of the interval library.

Алгебра интервалов тотальна: несравнимые значения деградируют до пустого
интервала и не порождают исключений. Исключения ниже возникают только на
границах библиотеки: отсутствие oracle смежности для типа точек, разбор
текстовой нотации, относительные временные окна.
"""


class AdjacencyOracleMissing(TypeError):
    """
    Для типа точек не определён oracle смежности (nothing_between).

    Аналог отсутствующей capability типа: хранение границ возможно, но
    операции, которым нужен порядок между границами разной ориентации
    (is_empty, contains_interval, equivalent, ...), недоступны.
    """

    def __init__(self, point_type: type):
        self.point_type = point_type
        super().__init__(
            f"No nothing_between() oracle for {point_type.__qualname__}: "
            f"register one with register_nothing_between() or define a "
            f"nothing_between(other) method"
        )


class IntervalParseError(ValueError):
    """
    Текст не является корректной bracket-нотацией интервала.

    Атрибут text содержит исходную строку для диагностики.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid interval {text!r}: {reason}")
