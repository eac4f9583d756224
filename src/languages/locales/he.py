"""
Hebrew (he) и Biblical Hebrew (hbo)

he: современный регистр, женский род по умолчанию.
hbo: библейский регистр, мужской род по умолчанию; сотни и тысячи
согласуются с родом (שלשה מאות / שלש מאות).
Опция biblical переключает регистр словаря в обоих языках.
"""

from src.core.domain.rules import DecimalMode, Gender, LanguageRules
from src.languages.contract import LanguageContract
from src.languages.strategies.hebrew import HebrewGenderForms, HebrewStrategy, HebrewVocabulary

ONES_MASCULINE = ("", "אחד", "שניים", "שלשה", "ארבעה", "חמשה", "ששה", "שבעה", "שמונה", "תשעה")
ONES_FEMININE = ("", "אחת", "שתים", "שלש", "ארבע", "חמש", "שש", "שבע", "שמונה", "תשע")

TEENS_MASCULINE = (
    "עשרה",
    "אחד עשר",
    "שנים עשר",
    "שלשה עשר",
    "ארבעה עשר",
    "חמשה עשר",
    "ששה עשר",
    "שבעה עשר",
    "שמונה עשר",
    "תשעה עשר",
)
TEENS_FEMININE = (
    "עשר",
    "אחת עשרה",
    "שתים עשרה",
    "שלש עשרה",
    "ארבע עשרה",
    "חמש עשרה",
    "שש עשרה",
    "שבע עשרה",
    "שמונה עשרה",
    "תשע עשרה",
)

TENS = ("", "", "עשרים", "שלשים", "ארבעים", "חמישים", "ששים", "שבעים", "שמונים", "תשעים")

HUNDREDS_MASCULINE = (
    "",
    "מאה",
    "מאתיים",
    "שלשה מאות",
    "ארבעה מאות",
    "חמשה מאות",
    "ששה מאות",
    "שבעה מאות",
    "שמונה מאות",
    "תשעה מאות",
)
HUNDREDS_FEMININE = (
    "",
    "מאה",
    "מאתיים",
    "שלש מאות",
    "ארבע מאות",
    "חמש מאות",
    "שש מאות",
    "שבע מאות",
    "שמונה מאות",
    "תשע מאות",
)

THOUSANDS_MASCULINE = (
    "",
    "אלף",
    "אלפיים",
    "שלשה אלפים",
    "ארבעה אלפים",
    "חמשה אלפים",
    "ששה אלפים",
    "שבעה אלפים",
    "שמונה אלפים",
    "תשעה אלפים",
)
THOUSANDS_CONSTRUCT = (
    "",
    "אלף",
    "אלפיים",
    "שלשת אלפים",
    "ארבעת אלפים",
    "חמשת אלפים",
    "ששת אלפים",
    "שבעת אלפים",
    "שמונת אלפים",
    "תשעת אלפים",
)

SCALES = ("אלף", "מיליון", "מיליארד", "טריליון", "קוודרליון", "קווינטיליון")
SCALES_PLURAL = ("אלפים", "מיליונים", "מיליארדים", "טריליונים", "קוודרליונים", "קווינטיליונים")

FEMININE_FORMS = HebrewGenderForms(
    ones=ONES_FEMININE,
    teens=TEENS_FEMININE,
    hundreds=HUNDREDS_FEMININE,
    thousands=THOUSANDS_CONSTRUCT,
)

# Современный иврит: сотни и тысячи не зависят от рода
MODERN_VOCABULARY = HebrewVocabulary(
    masculine=HebrewGenderForms(
        ones=ONES_MASCULINE,
        teens=TEENS_MASCULINE,
        hundreds=HUNDREDS_FEMININE,
        thousands=THOUSANDS_CONSTRUCT,
    ),
    feminine=FEMININE_FORMS,
    tens=TENS,
    scales=SCALES,
    scales_plural=SCALES_PLURAL,
)

BIBLICAL_VOCABULARY = HebrewVocabulary(
    masculine=HebrewGenderForms(
        ones=ONES_MASCULINE,
        teens=TEENS_MASCULINE,
        hundreds=HUNDREDS_MASCULINE,
        thousands=THOUSANDS_MASCULINE,
    ),
    feminine=FEMININE_FORMS,
    tens=TENS,
    scales=SCALES,
    scales_plural=SCALES_PLURAL,
)

HEBREW_RULES = LanguageRules(
    code="he",
    name="Hebrew",
    zero_word="אפס",
    negative_word="מינוס",
    decimal_separator_word="נקודה",
    decimal_mode=DecimalMode.PER_DIGIT,
    options_schema="hebrew_options",
)

BIBLICAL_HEBREW_RULES = HEBREW_RULES.model_copy(update={"code": "hbo", "name": "Biblical Hebrew"})

HEBREW = LanguageContract(
    HebrewStrategy(HEBREW_RULES, MODERN_VOCABULARY, BIBLICAL_VOCABULARY)
)
BIBLICAL_HEBREW = LanguageContract(
    HebrewStrategy(
        BIBLICAL_HEBREW_RULES,
        MODERN_VOCABULARY,
        BIBLICAL_VOCABULARY,
        default_gender=Gender.MASCULINE,
        default_biblical=True,
    )
)
