from pydantic import BaseModel, Field, field_validator
from typing import Dict
from core.i18n import is_valid_locale

class TranslationUpdate(BaseModel):
    locale: str = Field(..., min_length=2)
    translations: Dict[str, str]

    @field_validator("locale")
    @classmethod
    def check_locale(cls, value):
        if not is_valid_locale(value):
            raise ValueError("Invalid locale code")
        return value
