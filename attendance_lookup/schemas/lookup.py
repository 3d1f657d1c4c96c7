import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from attendance_lookup.constants import AUTO_DETECT, MOBILE_NUMBER_LENGTH, MOBILE_NUMBER_PREFIX
from attendance_lookup.enums.language import Language

MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_mobile(value: str) -> str:
    value = value.strip()
    if len(value) != MOBILE_NUMBER_LENGTH or not value.isdigit():
        raise ValueError(f"Mobile number must be exactly {MOBILE_NUMBER_LENGTH} digits")
    if not value.startswith(MOBILE_NUMBER_PREFIX):
        raise ValueError(f"Mobile number must start with {MOBILE_NUMBER_PREFIX}")
    return value


class AttendanceLookupRequest(BaseModel):
    mobile: str
    month: str
    lang: Optional[Language] = None

    @field_validator("mobile")
    @classmethod
    def _check_mobile(cls, value: str) -> str:
        return validate_mobile(value)

    @field_validator("month")
    @classmethod
    def _check_month(cls, value: str) -> str:
        if not MONTH_PATTERN.match(value):
            raise ValueError("Month must be formatted as YYYY-MM")
        return value


class TranslateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    target_language: str
    source_language: str = AUTO_DETECT


class PreferencesUpdate(BaseModel):
    language: Optional[Language] = None
    mobile: Optional[str] = None

    @field_validator("mobile")
    @classmethod
    def _check_mobile(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return validate_mobile(value)


class MonthOption(BaseModel):
    value: str
    label: str = Field(..., min_length=1)
