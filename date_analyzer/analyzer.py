"""Date analysis orchestrator"""
import logging
from typing import Dict

from .colors import hex_colors, hsl_colors
from .derivation import derive_candidates
from .exceptions import ValidationError
from .models import AnalysisResult, DateInput, PerfectPowerMatch
from .predicates import is_narcissistic, is_palindrome, is_perfect_power, is_prime
from .relations import find_equations, is_pythagorean

logger = logging.getLogger(__name__)


class DateAnalyzer:
    """Runs the full battery of checks over a date"""

    # Allowed ranges (inclusive)
    DAY_RANGE = (1, 31)
    MONTH_RANGE = (1, 12)
    YEAR_RANGE = (1, 2500)

    def validate(self, data: DateInput) -> None:
        """Checks every field independently and raises ValidationError on any failure"""
        errors: Dict[str, str] = {}
        fields = [
            ('day', data.day, self.DAY_RANGE),
            ('month', data.month, self.MONTH_RANGE),
            ('year', data.year, self.YEAR_RANGE),
        ]

        for name, value, (low, high) in fields:
            if value < low or value > high:
                errors[name] = f"{name.title()} must be between {low} and {high}"

        if errors:
            logger.warning(f"Invalid date {data.day}/{data.month}/{data.year}: {errors}")
            raise ValidationError(errors)

    def analyze(self, data: DateInput) -> AnalysisResult:
        """Main analysis entry point"""
        self.validate(data)

        day, month, year = data.day, data.month, data.year
        candidates = derive_candidates(day, month, year)

        powers = []
        for num in candidates:
            check = is_perfect_power(num)
            if check['is_power']:
                powers.append(PerfectPowerMatch(num=num, base=check['base'], power=check['power']))

        result = AnalysisResult(
            prime=tuple(num for num in candidates if is_prime(num)),
            palindrome=tuple(num for num in candidates if is_palindrome(num)),
            perfect_power=tuple(powers),
            narcissistic=tuple(num for num in candidates if is_narcissistic(num)),
            pythagorean=is_pythagorean(day, month, year),
            equations=tuple(find_equations(day, month, year)),
            hex_colors=hex_colors(day, month, year),
            hsl_colors=hsl_colors(day, month, year),
            original_date=data,
            candidates=tuple(candidates),
        )

        logger.debug(f"Analyzed {month}/{day}/{year}: candidates={candidates}")
        return result


_analyzer = DateAnalyzer()


def analyze(day: int, month: int, year: int) -> AnalysisResult:
    """Analyzes a date given as separate components.

    Raises:
        ValidationError: if any component is out of range.
    """
    return _analyzer.analyze(DateInput(day=day, month=month, year=year))
