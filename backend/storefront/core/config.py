"""
Application configuration using Pydantic Settings
"""

import enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class CustomerNameFormat(str, enum.Enum):
    """How a customer's display name is rendered on public pages"""
    SHOW_EMAILS = "show_emails"
    SHOW_USERNAMES = "show_usernames"
    SHOW_FULL_NAMES = "show_full_names"
    SHOW_FIRST_NAME = "show_first_name"


class Settings(BaseSettings):
    """Application settings"""

    # News
    MAIN_PAGE_NEWS_COUNT: int = Field(default=3, description="Number of news items shown on the home page")
    NEWS_ARCHIVE_PAGE_SIZE: int = Field(default=10, description="Default page size of the news archive")

    # Media
    AVATAR_PICTURE_SIZE: int = Field(default=120, description="Avatar thumbnail size in pixels")
    PICTURE_THUMBS_URL: str = Field(default="/images/thumbs", description="Base URL of generated thumbnails")
    DEFAULT_AVATAR_FILE_NAME: str = Field(default="default-avatar.jpg", description="Fallback avatar image")
    DEFAULT_IMAGE_FILE_NAME: str = Field(default="default-image.png", description="Fallback entity image")

    # Customers
    ALLOW_CUSTOMERS_TO_UPLOAD_AVATARS: bool = Field(default=False, description="Customers may upload avatars")
    DEFAULT_AVATAR_ENABLED: bool = Field(default=True, description="Show a default avatar when none is uploaded")
    ALLOW_VIEWING_PROFILES: bool = Field(default=False, description="Public customer profiles are enabled")
    CUSTOMER_NAME_FORMAT: CustomerNameFormat = Field(
        default=CustomerNameFormat.SHOW_FIRST_NAME,
        description="Customer display name format",
    )
    GUEST_CUSTOMER_NAME: str = Field(default="Guest", description="Display name used for guest customers")

    # Captcha
    CAPTCHA_ENABLED: bool = Field(default=False, description="Captcha is enabled")
    CAPTCHA_SHOW_ON_NEWS_COMMENT_PAGE: bool = Field(
        default=False,
        description="Show captcha on the news comment form",
    )

    # Date and time
    DEFAULT_STORE_TIME_ZONE_ID: str = Field(default="UTC", description="Store time zone (IANA id)")
    ALLOW_CUSTOMERS_TO_SET_TIMEZONE: bool = Field(
        default=False,
        description="Use the customer's own time zone when set",
    )

    # Cache
    CACHE_DEFAULT_TTL_SECONDS: int = Field(default=3600, description="Lifetime of in-memory cache entries")

    @field_validator(
        'ALLOW_CUSTOMERS_TO_UPLOAD_AVATARS',
        'DEFAULT_AVATAR_ENABLED',
        'ALLOW_VIEWING_PROFILES',
        'CAPTCHA_ENABLED',
        'CAPTCHA_SHOW_ON_NEWS_COMMENT_PAGE',
        'ALLOW_CUSTOMERS_TO_SET_TIMEZONE',
        mode='before',
    )
    @classmethod
    def validate_bool_flags(cls, v):
        """Allow boolean flags to be passed as strings"""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return bool(v)

    @field_validator('CUSTOMER_NAME_FORMAT', mode='before')
    @classmethod
    def validate_name_format(cls, v):
        """Accept name formats case-insensitively"""
        if isinstance(v, str):
            return v.strip().lower()
        return v


    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
