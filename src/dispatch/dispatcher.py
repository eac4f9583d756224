"""Locale Dispatcher — разрешение BCP-47 тега в язык и рендеринг.

Разрешение тега (progressive fallback):
1. Точный тег (без учёта регистра: "FR-be" → "fr-BE")
2. Иначе отбрасывается крайний правый сабтег: fr-BE-XX → fr-BE → fr
3. Ничего не найдено → UnsupportedLanguage

Алиасы (es-US → es-MX) проверяются на каждом шаге наравне с
каноническими тегами.

Options проверяются как plain record (базовая схема: `lang` — строка) ДО
разрешения тега и разбора значения: ошибка в любой части входа
поднимается до начала рендеринга. Схему языка проверяет сам контракт,
один раз на вызов.
Ключ `lang` потребляется диспетчером; остальная запись передаётся языку
без изменений.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from src.core.contracts import validate_options
from src.core.errors import UnsupportedLanguage
from src.core.math.numeric_value import NumericInput
from src.languages.contract import LanguageContract
from src.languages.locales import ALIASES, LANGUAGES

logger = logging.getLogger(__name__)

SUBTAG_SEPARATOR = "-"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DispatchConfig:
    """Конфигурация диспетчера.

    default_language: язык, если options не содержит `lang`
    case_insensitive: сравнение тегов без учёта регистра
    """

    default_language: str = "en"
    case_insensitive: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Resolution:
    """Результат разрешения тега."""

    requested: str
    resolved: str  # канонический тег зарегистрированного языка
    contract: LanguageContract
    tried: Tuple[str, ...]  # кандидаты в порядке проверки

    @property
    def is_fallback(self) -> bool:
        return len(self.tried) > 1


# =============================================================================
# DISPATCHER
# =============================================================================


class LocaleDispatcher:
    """Реестр языков с BCP-47 fallback.

    Реестр строится один раз в конструкторе и дальше только читается,
    поэтому один экземпляр можно использовать из нескольких потоков.
    """

    def __init__(
        self,
        languages: Optional[Mapping[str, LanguageContract]] = None,
        aliases: Optional[Mapping[str, str]] = None,
        config: Optional[DispatchConfig] = None,
    ):
        """
        Args:
            languages: канонический тег → контракт (default: все локали пакета)
            aliases: тег → канонический тег (default: ALIASES пакета)
            config: конфигурация (default: DispatchConfig())
        """
        self.config = config or DispatchConfig()
        self._languages = MappingProxyType(dict(LANGUAGES if languages is None else languages))
        self._aliases = MappingProxyType(dict(ALIASES if aliases is None else aliases))

        for alias, target in self._aliases.items():
            if target not in self._languages:
                raise ValueError(f"Alias {alias!r} points to unknown language {target!r}")

        self._index: Dict[str, str] = {}
        for tag in self._languages:
            self._index[self._key(tag)] = tag
        for alias, target in self._aliases.items():
            self._index.setdefault(self._key(alias), target)

    def _key(self, tag: str) -> str:
        return tag.lower() if self.config.case_insensitive else tag

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    @staticmethod
    def candidates(tag: str) -> List[str]:
        """Кандидаты fallback: 'fr-BE-XX' → ['fr-BE-XX', 'fr-BE', 'fr']."""
        subtags = tag.split(SUBTAG_SEPARATOR)
        return [SUBTAG_SEPARATOR.join(subtags[:end]) for end in range(len(subtags), 0, -1)]

    def lookup(self, tag: Any) -> Resolution:
        """Разрешение тега с записью пройденных кандидатов.

        Raises:
            UnsupportedLanguage: тег не строка, пустой или ни один
                префикс не зарегистрирован
        """
        if not isinstance(tag, str) or not tag.strip():
            raise UnsupportedLanguage(str(tag))

        requested = tag.strip()
        tried: List[str] = []
        for candidate in self.candidates(requested):
            tried.append(candidate)
            resolved = self._index.get(self._key(candidate))
            if resolved is None:
                continue
            contract = self._languages[resolved]
            if len(tried) > 1 or resolved != requested:
                logger.debug(
                    "Language tag %r resolved to %r (%s) via %s",
                    requested,
                    resolved,
                    contract.kind.value,
                    " -> ".join(tried),
                )
            return Resolution(
                requested=requested,
                resolved=resolved,
                contract=contract,
                tried=tuple(tried),
            )

        raise UnsupportedLanguage(requested)

    def resolve(self, tag: Any) -> LanguageContract:
        """Контракт языка для тега (см. lookup)."""
        return self.lookup(tag).contract

    def supports(self, tag: Any) -> bool:
        try:
            self.lookup(tag)
        except UnsupportedLanguage:
            return False
        return True

    def supported_languages(self) -> Tuple[str, ...]:
        """Канонические теги и алиасы в алфавитном порядке."""
        return tuple(sorted([*self._languages, *self._aliases]))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(
        self,
        tag: Any,
        value: NumericInput,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Рендеринг value на языке tag.

        Raises:
            InvalidOptions: options не plain record или нарушает схему языка
            UnsupportedLanguage: тег не разрешается
            InvalidType / InvalidFormat / NotFinite: ошибка значения
        """
        record = validate_options(options)
        return self.resolve(tag).convert(value, record)

    def render_with_options(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        """Рендеринг с языком из options['lang'] (default: config.default_language)."""
        record = validate_options(options)
        tag = record.get("lang", self.config.default_language)
        return self.resolve(tag).convert(value, record)

    def render_ordinal(
        self,
        tag: Any,
        value: NumericInput,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Порядковое числительное value на языке tag.

        Raises:
            InvalidOptions: options не plain record или нарушает схему языка
            UnsupportedLanguage: тег не разрешается или у языка нет порядковых
            InvalidType / InvalidFormat / NotFinite: value не целое > 0
            OutOfRange: value выше таблиц порядковых слов языка
        """
        record = validate_options(options)
        return self.resolve(tag).ordinal(value, record)

    def ordinal_with_options(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        record = validate_options(options)
        tag = record.get("lang", self.config.default_language)
        return self.resolve(tag).ordinal(value, record)


# =============================================================================
# MODULE-LEVEL API
# =============================================================================

_DEFAULT_DISPATCHER = LocaleDispatcher()


def get_dispatcher() -> LocaleDispatcher:
    return _DEFAULT_DISPATCHER


def render(value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
    """Число словами; язык задаётся options['lang'] (default 'en').

    Examples:
        >>> render(1000000)
        'one million'
        >>> render(70, {"lang": "fr-BE"})
        'septante'
    """
    return _DEFAULT_DISPATCHER.render_with_options(value, options)


def ordinal(value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
    """Порядковое числительное; язык задаётся options['lang'] (default 'en').

    Examples:
        >>> ordinal(21)
        'twenty-first'
        >>> ordinal(70, {"lang": "fr-BE"})
        'septantième'
    """
    return _DEFAULT_DISPATCHER.ordinal_with_options(value, options)


def resolve(tag: str) -> LanguageContract:
    return _DEFAULT_DISPATCHER.resolve(tag)


def supported_languages() -> Tuple[str, ...]:
    return _DEFAULT_DISPATCHER.supported_languages()
