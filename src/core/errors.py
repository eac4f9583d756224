"""
Errors — таксономия ошибок входных данных

Все ошибки обнаруживаются синхронно на границе (до начала рендеринга):
- InvalidType: значение не number/string/int
- InvalidFormat: строка не соответствует числовой грамматике
- NotFinite: NaN/Infinity
- UnsupportedLanguage: ни один префикс языкового тега не найден
- InvalidOptions: options не является plain record или нарушает схему языка
- OutOfRange: порядковое числительное выше последнего порядкового scale-слова

Каждая ошибка наследует и NumeralError, и соответствующее встроенное
исключение, поэтому вызывающий код может ловить как `NumeralError`,
так и `TypeError`/`ValueError`/`LookupError`.
"""


class NumeralError(Exception):
    """Базовое исключение для всех ошибок рендеринга чисел."""


class InvalidType(NumeralError, TypeError):
    """Значение не является number, string или arbitrary-precision int."""


class InvalidFormat(NumeralError, ValueError):
    """Строка не соответствует грамматике `^\\s*[+-]?\\d+(\\.\\d+)?\\s*$`."""


class NotFinite(NumeralError, ValueError):
    """Значение NaN или ±Infinity."""


class OutOfRange(NumeralError, ValueError):
    """Значение выше диапазона, который покрывают таблицы языка."""


class UnsupportedLanguage(NumeralError, LookupError):
    """
    Языковой тег не разрешается ни в один зарегистрированный язык.

    Хранит исходный тег для диагностики.
    """

    def __init__(self, tag: str, message: str | None = None):
        self.tag = tag
        super().__init__(message or f"Unsupported language: {tag!r}")


class InvalidOptions(NumeralError, TypeError):
    """Options не является plain record или содержит значения неверного типа."""
