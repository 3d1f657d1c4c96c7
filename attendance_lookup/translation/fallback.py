"""
Dictionary translations for common attendance terms, used when no
translation provider can be reached.
"""

import re
from typing import Optional

from attendance_lookup.constants import SOURCE_LANGUAGE

FALLBACK_TRANSLATIONS: dict[str, dict[str, str]] = {
    "absent": {"bn": "অনুপস্থিত", "hi": "अनुपस्थित", "ar": "غائب"},
    "present": {"bn": "উপস্থিত", "hi": "उपस्थित", "ar": "حاضر"},
    "late": {"bn": "বিলম্ব", "hi": "देर", "ar": "متأخر"},
    "early": {"bn": "শীঘ্র", "hi": "जल्दी", "ar": "مبكر"},
    "sunday": {"bn": "রবিবার", "hi": "रविवार", "ar": "الأحد"},
    "monday": {"bn": "সোমবার", "hi": "सोमवार", "ar": "الاثنين"},
    "tuesday": {"bn": "মঙ্গলবার", "hi": "मंगलवार", "ar": "الثلاثاء"},
    "wednesday": {"bn": "বুধবার", "hi": "बुधवार", "ar": "الأربعاء"},
    "thursday": {"bn": "বৃহস্পতিবার", "hi": "गुरुवार", "ar": "الخميس"},
    "friday": {"bn": "শুক্রবার", "hi": "शुक्रवार", "ar": "الجمعة"},
    "saturday": {"bn": "শনিবার", "hi": "शनिवार", "ar": "السبت"},
    "warning": {"bn": "সতর্কতা", "hi": "चेतावनी", "ar": "تحذير"},
    "sick": {"bn": "অসুস্থ", "hi": "बीमार", "ar": "مريض"},
    "leave": {"bn": "ছুটি", "hi": "छुट्टी", "ar": "إجازة"},
    "holiday": {"bn": "ছুটির দিন", "hi": "छुट्टी का दिन", "ar": "يوم عطلة"},
    "overtime": {"bn": "অতিরিক্ত সময়", "hi": "ओवरटाइम", "ar": "وقت إضافي"},
    "break": {"bn": "বিরতি", "hi": "ब्रेक", "ar": "استراحة"},
    "duty": {"bn": "কর্তব্য", "hi": "ड्यूटी", "ar": "واجب"},
    "work": {"bn": "কাজ", "hi": "काम", "ar": "عمل"},
    "location": {"bn": "অবস্থান", "hi": "स्थान", "ar": "موقع"},
    "time": {"bn": "সময়", "hi": "समय", "ar": "وقت"},
    "hour": {"bn": "ঘন্টা", "hi": "घंटा", "ar": "ساعة"},
    "minute": {"bn": "মিনিট", "hi": "मिनट", "ar": "دقيقة"},
}


def get_fallback_translation(text: str, target_language: str) -> Optional[str]:
    """
    Translate ``text`` using the keyword dictionary.

    An exact (case-insensitive) match wins. Otherwise the first dictionary
    key found anywhere in the text has every occurrence replaced, which
    also hits keys embedded in longer words ("break" in "breakfast").
    Returns None when nothing matches.
    """
    if target_language == SOURCE_LANGUAGE:
        return None

    lower_text = text.lower().strip()

    exact = FALLBACK_TRANSLATIONS.get(lower_text, {}).get(target_language)
    if exact:
        return exact

    for key, translations in FALLBACK_TRANSLATIONS.items():
        translation = translations.get(target_language)
        if key in lower_text and translation:
            return re.sub(re.escape(key), lambda _: translation, text, flags=re.IGNORECASE)

    return None


def has_fallback_translation(text: str, target_language: str) -> bool:
    return get_fallback_translation(text, target_language) is not None
