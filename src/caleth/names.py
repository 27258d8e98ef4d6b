"""Month and weekday name tables, Latin transliteration and Ge'ez script."""

from __future__ import annotations
from typing import Dict, Tuple

ETHIOPIAN_MONTHS: Tuple[str, ...] = (
    "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
    "Miazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
)

ETHIOPIAN_MONTHS_AMHARIC: Tuple[str, ...] = (
    "መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት", "መጋቢት",
    "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜ",
)

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Indexed like date.weekday(): 0=Monday .. 6=Sunday
ETHIOPIAN_WEEKDAYS: Tuple[str, ...] = (
    "Segno", "Maksegno", "Rob", "Hamus", "Arb", "Kidame", "Ehud",
)

ETHIOPIAN_WEEKDAYS_AMHARIC: Tuple[str, ...] = (
    "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ", "እሑድ",
)

ETHIOPIAN_MONTH_MAP: Dict[str, int] = {m.lower(): i for i, m in enumerate(ETHIOPIAN_MONTHS, 1)}
ETHIOPIAN_MONTH_MAP_AMHARIC: Dict[str, int] = {m: i for i, m in enumerate(ETHIOPIAN_MONTHS_AMHARIC, 1)}

SCRIPTS = ("latin", "geez")


def ethiopian_month_names(script: str = "latin") -> Tuple[str, ...]:
    if script == "latin":
        return ETHIOPIAN_MONTHS
    if script == "geez":
        return ETHIOPIAN_MONTHS_AMHARIC
    raise ValueError(f"script must be one of {SCRIPTS}, got '{script}'")


def ethiopian_weekday_names(script: str = "latin") -> Tuple[str, ...]:
    if script == "latin":
        return ETHIOPIAN_WEEKDAYS
    if script == "geez":
        return ETHIOPIAN_WEEKDAYS_AMHARIC
    raise ValueError(f"script must be one of {SCRIPTS}, got '{script}'")
