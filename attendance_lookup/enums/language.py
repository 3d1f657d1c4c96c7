from enum import Enum


class Language(str, Enum):
    ENGLISH = "en"
    BANGLA = "bn"
    HINDI = "hi"
    ARABIC = "ar"

    @property
    def is_rtl(self) -> bool:
        return self is Language.ARABIC
