import calendar
from datetime import date
from typing import Optional

from attendance_lookup.constants import MONTH_OPTIONS_COUNT
from attendance_lookup.enums.language import Language
from attendance_lookup.schemas.lookup import MonthOption

MONTH_NAMES = {
    Language.ENGLISH: [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    Language.BANGLA: [
        "জানুয়ারি", "ফেব্রুয়ারি", "মার্চ", "এপ্রিল", "মে", "জুন",
        "জুলাই", "আগস্ট", "সেপ্টেম্বর", "অক্টোবর", "নভেম্বর", "ডিসেম্বর",
    ],
    Language.HINDI: [
        "जनवरी", "फरवरी", "मार्च", "अप्रैल", "मई", "जून",
        "जुलाई", "अगस्त", "सितंबर", "अक्टूबर", "नवंबर", "दिसंबर",
    ],
    Language.ARABIC: [
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ],
}  # fmt: skip


def parse_month(month_value: str) -> date:
    """Parse "YYYY-MM" into the first day of that month."""
    year, month = month_value.split("-")
    return date(int(year), int(month), 1)


def get_month_range(month_value: str) -> tuple[date, date]:
    """Returns the first and last day of a "YYYY-MM" month."""
    month_start = parse_month(month_value)
    last_day = calendar.monthrange(month_start.year, month_start.month)[1]
    return month_start, month_start.replace(day=last_day)


def get_relative_month(months_till: int = 0, from_date: Optional[date] = None) -> date:
    """Get the first day of a month relative to a reference date.

    Args:
        months_till: Number of months to offset (negative for past, positive for future)
        from_date: Reference date to calculate from (defaults to today)

    Returns:
        First day of the target month
    """
    if from_date is None:
        from_date = date.today()

    total_months = (from_date.year * 12 + from_date.month - 1) + months_till

    year = total_months // 12
    month = (total_months % 12) + 1

    return date(year, month, 1)


def get_month_options(language: Language = Language.ENGLISH, today: Optional[date] = None) -> list[MonthOption]:
    """The selectable lookup months, newest first, labelled in ``language``."""
    names = MONTH_NAMES[language]
    options = []
    for offset in range(MONTH_OPTIONS_COUNT):
        month_start = get_relative_month(-offset, today)
        options.append(
            MonthOption(
                value=month_start.strftime("%Y-%m"),
                label=f"{names[month_start.month - 1]} {month_start.year}",
            )
        )
    return options
