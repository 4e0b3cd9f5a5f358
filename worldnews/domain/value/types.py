"""Domain value objects for World News.

Value objects are immutable and defined by their values, not identity.
Closed enums reject unknown values at the boundary.
"""

import re
from enum import Enum

from pydantic import field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from worldnews.domain.value.common import RootValueObject, ValueObject


class Category(str, Enum):
    """News category a post is filed under."""

    CULTURE = "culture"
    SPORTS = "sports"
    EDUCATION = "education"
    LIFESTYLE = "lifestyle"
    ENVIRONMENT = "environment"
    POLITICS = "politics"


class CountryCode(str, Enum):
    """Countries a post can be tagged with."""

    US = "US"
    UK = "UK"
    FR = "FR"
    DE = "DE"
    JP = "JP"
    BR = "BR"
    IN = "IN"
    AU = "AU"

    @property
    def info(self) -> "CountryInfo":
        """Display name and flag for this country."""
        return COUNTRIES[self]


class CountryInfo(ValueObject):
    """Reference data shown next to a country code."""

    code: CountryCode
    name: str
    flag: str


COUNTRIES: dict[CountryCode, CountryInfo] = {
    CountryCode.US: CountryInfo(code=CountryCode.US, name="United States", flag="🇺🇸"),
    CountryCode.UK: CountryInfo(code=CountryCode.UK, name="United Kingdom", flag="🇬🇧"),
    CountryCode.FR: CountryInfo(code=CountryCode.FR, name="France", flag="🇫🇷"),
    CountryCode.DE: CountryInfo(code=CountryCode.DE, name="Germany", flag="🇩🇪"),
    CountryCode.JP: CountryInfo(code=CountryCode.JP, name="Japan", flag="🇯🇵"),
    CountryCode.BR: CountryInfo(code=CountryCode.BR, name="Brazil", flag="🇧🇷"),
    CountryCode.IN: CountryInfo(code=CountryCode.IN, name="India", flag="🇮🇳"),
    CountryCode.AU: CountryInfo(code=CountryCode.AU, name="Australia", flag="🇦🇺"),
}


class ContactType(str, Enum):
    """How an account is reached and identified at sign-in."""

    EMAIL = "email"
    PHONE = "phone"


_PHONE_SEPARATORS = re.compile(r"[\s\-().]")
_PHONE_PATTERN = re.compile(r"^\+?[0-9]{7,15}$")


class Contact(ValueObject):
    """Normalized sign-in identifier: an email address or a phone number.

    Emails are lower-cased; phone numbers keep only digits and an
    optional leading '+'.
    """

    type: ContactType
    value: str

    @classmethod
    def parse(cls, raw: str) -> "Contact":
        """Parse a user-supplied identifier.

        Args:
            raw: Email address or phone number as typed

        Returns:
            Normalized contact

        Raises:
            ValueError: If the identifier is neither a valid email nor phone
        """
        raw = raw.strip()
        if "@" in raw:
            try:
                _, email = validate_email(raw)
            except PydanticCustomError as e:
                raise ValueError(f"Invalid email address: {raw}") from e
            return cls(type=ContactType.EMAIL, value=email.lower())

        phone = _PHONE_SEPARATORS.sub("", raw)
        if not _PHONE_PATTERN.match(phone):
            raise ValueError(f"Invalid phone number: {raw}")
        return cls(type=ContactType.PHONE, value=phone)

    def __str__(self) -> str:
        return self.value


class Handle(RootValueObject[str]):
    """Public username, e.g. 'guest_explorer'."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle characters and length."""
        if not re.match(r"^[A-Za-z0-9_.]{2,50}$", v):
            raise ValueError(
                "Username must be 2-50 characters of letters, digits, '_' or '.'"
            )
        return v


class FontSize(str, Enum):
    """Base font size of the site."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ImageSize(str, Enum):
    """Display size of post images."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class FontFamily(str, Enum):
    """Typeface used for body text."""

    INTER = "inter"
    PLAYFAIR = "playfair"
    SYSTEM = "system"


class SharePlatform(str, Enum):
    """Share targets offered for a post."""

    WHATSAPP = "whatsapp"
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    COPY = "copy"


class LikeState(ValueObject):
    """Outcome of a like toggle: membership after the call and the new count."""

    liked: bool
    likes: int
