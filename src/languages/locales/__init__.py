"""Locales — статические таблицы языков и готовые LanguageContract.

Каждый модуль строит свои контракты при импорте; после этого они
только читаются.
"""

from .az import AZERBAIJANI
from .bn import BENGALI
from .en import BRITISH_ENGLISH, ENGLISH
from .es import MEXICAN_SPANISH, SPANISH
from .fr import BELGIAN_FRENCH, FRENCH
from .he import BIBLICAL_HEBREW, HEBREW
from .hi import HINDI
from .pl import POLISH
from .ru import RUSSIAN
from .tr import TURKISH
from .uk import UKRAINIAN
from .zh_hans import SIMPLIFIED_CHINESE

# Канонический тег → контракт
LANGUAGES = {
    contract.code: contract
    for contract in (
        ENGLISH,
        BRITISH_ENGLISH,
        FRENCH,
        BELGIAN_FRENCH,
        SPANISH,
        MEXICAN_SPANISH,
        RUSSIAN,
        UKRAINIAN,
        POLISH,
        HINDI,
        BENGALI,
        TURKISH,
        AZERBAIJANI,
        HEBREW,
        BIBLICAL_HEBREW,
        SIMPLIFIED_CHINESE,
    )
}

# Региональные теги, которые используют данные другого региона
ALIASES = {
    "es-US": "es-MX",
}

__all__ = [
    "LANGUAGES",
    "ALIASES",
    "ENGLISH",
    "BRITISH_ENGLISH",
    "FRENCH",
    "BELGIAN_FRENCH",
    "SPANISH",
    "MEXICAN_SPANISH",
    "RUSSIAN",
    "UKRAINIAN",
    "POLISH",
    "HINDI",
    "BENGALI",
    "TURKISH",
    "AZERBAIJANI",
    "HEBREW",
    "BIBLICAL_HEBREW",
    "SIMPLIFIED_CHINESE",
]
