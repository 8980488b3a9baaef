from pydantic import AnyHttpUrl, BaseModel, EmailStr, Field, TypeAdapter, ValidationError, field_validator
from typing import Dict, Optional
from models.common import LocalizedText

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

http_url = TypeAdapter(AnyHttpUrl)

class ContactInfo(BaseModel):
    address: Optional[LocalizedText] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None

class OpeningHour(BaseModel):
    open: Optional[str] = Field(None, pattern=TIME_PATTERN)
    close: Optional[str] = Field(None, pattern=TIME_PATTERN)
    closed: bool = False

class OpeningHours(BaseModel):
    monday: Optional[OpeningHour] = None
    tuesday: Optional[OpeningHour] = None
    wednesday: Optional[OpeningHour] = None
    thursday: Optional[OpeningHour] = None
    friday: Optional[OpeningHour] = None
    saturday: Optional[OpeningHour] = None
    sunday: Optional[OpeningHour] = None

class SettingsUpdate(BaseModel):
    """Partial update of the restaurant settings singleton; only `id` is required."""
    id: str = Field(..., min_length=1)
    name: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    contactInfo: Optional[ContactInfo] = None
    openingHours: Optional[OpeningHours] = None
    socialMedia: Optional[Dict[str, str]] = None
    locale: Optional[str] = None

    @field_validator("socialMedia")
    @classmethod
    def check_social_urls(cls, value):
        if value is None:
            return value
        # stored as sent, AnyHttpUrl would normalize the text
        for platform, url in value.items():
            try:
                http_url.validate_python(url)
            except ValidationError:
                raise ValueError(f"Invalid URL for {platform}")
        return value
