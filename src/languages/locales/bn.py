"""Bengali (bn) — SouthAsian: হাজার, লাখ, কোটি, আরব, খরব, নীল, পদ্ম, শঙ্খ."""

from src.core.domain.rules import LanguageRules
from src.languages.contract import LanguageContract
from src.languages.strategies.south_asian import SouthAsianOrdinals, SouthAsianStrategy, SouthAsianVocabulary

BENGALI_VOCABULARY = SouthAsianVocabulary(
    below_hundred=(
        "শূন্য", "এক", "দুই", "তিন", "চার", "পাঁচ", "ছয়", "সাত", "আট", "নয়",
        "দশ", "এগারো", "বারো", "তেরো", "চৌদ্দ", "পনেরো", "ষোল", "সতেরো", "আঠারো", "উনিশ",
        "বিশ", "একুশ", "বাইশ", "তেইশ", "চব্বিশ", "পঁচিশ", "ছাব্বিশ", "সাতাশ", "আঠাশ", "উনত্রিশ",
        "ত্রিশ", "একত্রিশ", "বত্রিশ", "তেত্রিশ", "চৌত্রিশ", "পঁয়ত্রিশ", "ছত্রিশ", "সাঁইত্রিশ", "আটত্রিশ", "উনচল্লিশ",
        "চল্লিশ", "একচল্লিশ", "বেয়াল্লিশ", "তেতাল্লিশ", "চুয়াল্লিশ", "পঁয়তাল্লিশ", "ছেচল্লিশ", "সাতচল্লিশ", "আটচল্লিশ", "উনপঞ্চাশ",
        "পঞ্চাশ", "একান্ন", "বাহান্ন", "তিপ্পান্ন", "চুয়ান্ন", "পঞ্চান্ন", "ছাপ্পান্ন", "সাতান্ন", "আটান্ন", "উনষাট",
        "ষাট", "একষট্টি", "বাষট্টি", "তেষট্টি", "চৌষট্টি", "পঁয়ষট্টি", "ছেষট্টি", "সাতষট্টি", "আটষট্টি", "ঊনসত্তর",
        "সত্তর", "একাত্তর", "বাহাত্তর", "তেহাত্তর", "চুয়াত্তর", "পঁচাত্তর", "ছিয়াত্তর", "সাতাত্তর", "আটাত্তর", "উনআশি",
        "আশি", "একাশি", "বিরাশি", "তিরাশি", "চুরাশি", "পঁচাশি", "ছিয়াশি", "সাতাশি", "আটাশি", "উননব্বই",
        "নব্বই", "একানব্বই", "বিরানব্বই", "তিরানব্বই", "চুরানব্বই", "পঁচানব্বই", "ছিয়ানব্বই", "সাতানব্বই", "আটানব্বই", "নিরানব্বই",
    ),
    hundred_word="শত",
    scale_words=("", "হাজার", "লাখ", "কোটি", "আরব", "খরব", "নীল", "পদ্ম", "শঙ্খ"),
)

BENGALI_RULES = LanguageRules(
    code="bn",
    name="Bengali",
    zero_word="শূন্য",
    negative_word="মাইনাস",
    decimal_separator_word="দশমিক",
    options_schema="base_options",
)

BENGALI_ORDINALS = SouthAsianOrdinals(
    special=("", "প্রথম", "দ্বিতীয়", "তৃতীয়", "চতুর্থ", "পঞ্চম", "ষষ্ঠ"),
    suffix="তম",
)

BENGALI = LanguageContract(SouthAsianStrategy(BENGALI_RULES, BENGALI_VOCABULARY), ordinal=BENGALI_ORDINALS)
