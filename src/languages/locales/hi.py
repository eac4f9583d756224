"""Hindi (hi) — SouthAsian: हज़ार, लाख, करोड़, अरब, खरब, नील, पद्म, शंख."""

from src.core.domain.rules import LanguageRules
from src.languages.contract import LanguageContract
from src.languages.strategies.south_asian import SouthAsianOrdinals, SouthAsianStrategy, SouthAsianVocabulary

HINDI_VOCABULARY = SouthAsianVocabulary(
    below_hundred=(
        "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
        "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
        "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
        "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
        "चालीस", "इकतालीस", "बयालीस", "तेतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
        "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
        "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
        "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
        "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
        "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
    ),
    hundred_word="सौ",
    scale_words=("", "हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख"),
)

HINDI_RULES = LanguageRules(
    code="hi",
    name="Hindi",
    zero_word="शून्य",
    negative_word="माइनस",
    decimal_separator_word="दशमलव",
    options_schema="base_options",
)

HINDI_ORDINALS = SouthAsianOrdinals(
    special=("", "पहला", "दूसरा", "तीसरा", "चौथा", "पाँचवाँ", "छठा"),
    suffix="वाँ",
)

HINDI = LanguageContract(SouthAsianStrategy(HINDI_RULES, HINDI_VOCABULARY), ordinal=HINDI_ORDINALS)
