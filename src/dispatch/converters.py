"""
Bound Converters — конвертеры, привязанные к одному языку

Вызов без ключа `lang`: EnglishConverter(42) → 'forty-two',
EnglishConverter.ordinal(42) → 'forty-second'.
Язык разрешается при создании конвертера, так что неизвестный тег
обнаруживается сразу, а не при первом вызове.
"""

from typing import Any, Mapping, Optional

from src.core.math.numeric_value import NumericInput
from src.dispatch.dispatcher import LocaleDispatcher, get_dispatcher


class BoundConverter:
    """Конвертер `(value, options=None) -> str` для одного языка."""

    def __init__(self, tag: str, dispatcher: Optional[LocaleDispatcher] = None):
        self.tag = tag
        self.contract = (dispatcher or get_dispatcher()).resolve(tag)

    def __call__(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        # `lang` в options игнорируется: язык уже выбран
        return self.contract.convert(value, options)

    def ordinal(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        return self.contract.ordinal(value, options)

    def __repr__(self) -> str:
        return f"BoundConverter({self.tag!r})"


EnglishConverter = BoundConverter("en")
BritishEnglishConverter = BoundConverter("en-GB")
FrenchConverter = BoundConverter("fr")
BelgianFrenchConverter = BoundConverter("fr-BE")
SpanishConverter = BoundConverter("es")
MexicanSpanishConverter = BoundConverter("es-MX")
RussianConverter = BoundConverter("ru")
UkrainianConverter = BoundConverter("uk")
PolishConverter = BoundConverter("pl")
HindiConverter = BoundConverter("hi")
BengaliConverter = BoundConverter("bn")
TurkishConverter = BoundConverter("tr")
AzerbaijaniConverter = BoundConverter("az")
HebrewConverter = BoundConverter("he")
BiblicalHebrewConverter = BoundConverter("hbo")
SimplifiedChineseConverter = BoundConverter("zh-Hans")
