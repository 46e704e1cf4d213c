"""Configuration management for the Dafku Proposal Engine."""

import math
import re
from datetime import date, datetime
from functools import lru_cache
from typing import Any, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # Supabase Configuration
    # ===========================================
    SUPABASE_URL: str = Field(default="", description="Supabase project URL")
    SUPABASE_KEY: str = Field(default="", description="Supabase service key")
    CUSTOMERS_TABLE: str = Field(
        default="customers",
        description="Table holding customer records and proposal fields"
    )

    # ===========================================
    # Proposal Configuration
    # ===========================================
    PROPOSAL_VALIDITY_DAYS: int = Field(
        default=14,
        description="Days a sent proposal stays valid before it expires"
    )

    # ===========================================
    # Server Configuration
    # ===========================================
    DEBUG: bool = Field(default=True, description="Debug mode")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


# ===========================================
# Intake Value Parsers
# ===========================================
# The intake wizard stores free-form answers; these helpers turn them into
# "present" values or None without ever raising.

SKIP_ANSWER_PATTERN = re.compile(r"^(none|skip|n/a|no|-)$", re.IGNORECASE)


def clean_text(value: Any) -> Optional[str]:
    """Strip a text answer, returning None for blank values."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def is_skip_answer(value: Any) -> bool:
    """True when an answer is blank or one of the wizard's skip tokens."""
    text = clean_text(value)
    if text is None:
        return True
    return bool(SKIP_ANSWER_PATTERN.match(text))


def parse_int_value(value: Any) -> Optional[int]:
    """Parse a whole-number field (fees in Lek, counts)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        text = str(value).strip().replace(",", "").replace("_", "")
        if not text:
            return None
        return int(float(text))
    except (ValueError, TypeError, OverflowError):
        return None


def parse_float_value(value: Any) -> Optional[float]:
    """Parse a decimal field (percentages, EUR transaction values)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        text = str(value).strip().replace(",", "")
        if not text:
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    except (ValueError, TypeError):
        return None


def parse_date_value(value: Any) -> Optional[date]:
    """Parse an ISO date or datetime string into a date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None
