"""Data models for date analysis"""
from pydantic import BaseModel, ConfigDict
from typing import Tuple


class DateInput(BaseModel):
    """Input date components (not checked against calendar rules)"""
    model_config = ConfigDict(frozen=True)

    day: int
    month: int
    year: int


class PerfectPowerMatch(BaseModel):
    """Candidate expressible as base ** power"""
    model_config = ConfigDict(frozen=True)

    num: int
    base: int
    power: int  # 2..9


class ColorPair(BaseModel):
    """Colour strings for both digit orderings"""
    model_config = ConfigDict(frozen=True)

    mmddyy: str
    ddmmyy: str


class AnalysisResult(BaseModel):
    """Result of a single date analysis"""
    model_config = ConfigDict(frozen=True)

    # Predicate matches over the candidate set
    prime: Tuple[int, ...]
    palindrome: Tuple[int, ...]
    perfect_power: Tuple[PerfectPowerMatch, ...]
    narcissistic: Tuple[int, ...]

    # Relations between raw day, month and year
    pythagorean: bool
    equations: Tuple[str, ...]

    # Colours
    hex_colors: ColorPair
    hsl_colors: ColorPair

    original_date: DateInput
    candidates: Tuple[int, ...]
