"""Dispatch — разрешение языковых тегов и публичный API рендеринга.

- render(value, options): язык из options['lang'] (default 'en')
- ordinal(value, options): порядковое числительное, язык так же из options
- resolve(tag): BCP-47 fallback до зарегистрированного языка
- LocaleDispatcher: реестр языков с собственной конфигурацией
- *Converter: конвертеры, привязанные к одному языку
"""

from .dispatcher import (
    DispatchConfig,
    LocaleDispatcher,
    Resolution,
    get_dispatcher,
    ordinal,
    render,
    resolve,
    supported_languages,
)
from .converters import (
    AzerbaijaniConverter,
    BelgianFrenchConverter,
    BengaliConverter,
    BiblicalHebrewConverter,
    BoundConverter,
    BritishEnglishConverter,
    EnglishConverter,
    FrenchConverter,
    HebrewConverter,
    HindiConverter,
    MexicanSpanishConverter,
    PolishConverter,
    RussianConverter,
    SimplifiedChineseConverter,
    SpanishConverter,
    TurkishConverter,
    UkrainianConverter,
)

__all__ = [
    # API
    "render",
    "ordinal",
    "resolve",
    "supported_languages",
    "get_dispatcher",
    # Classes
    "DispatchConfig",
    "LocaleDispatcher",
    "Resolution",
    "BoundConverter",
    # Bound converters
    "EnglishConverter",
    "BritishEnglishConverter",
    "FrenchConverter",
    "BelgianFrenchConverter",
    "SpanishConverter",
    "MexicanSpanishConverter",
    "RussianConverter",
    "UkrainianConverter",
    "PolishConverter",
    "HindiConverter",
    "BengaliConverter",
    "TurkishConverter",
    "AzerbaijaniConverter",
    "HebrewConverter",
    "BiblicalHebrewConverter",
    "SimplifiedChineseConverter",
]
