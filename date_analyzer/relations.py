"""Relations between the raw day, month and year"""
from typing import List


def is_pythagorean(day: int, month: int, year: int) -> bool:
    return day * day + month * month == year * year


def find_equations(day: int, month: int, year: int) -> List[str]:
    """Lists every arithmetic identity between day and month equal to year.

    Checked in fixed order: +, -, ×, ÷, ^. All matches are reported.
    """
    equations = []

    if day + month == year:
        equations.append(f"{day} + {month} = {year}")
    if day - month == year:
        equations.append(f"{day} - {month} = {year}")
    if day * month == year:
        equations.append(f"{day} × {month} = {year}")
    # integer year only equals an exact quotient
    if month != 0 and day % month == 0 and day // month == year:
        equations.append(f"{day} ÷ {month} = {year}")
    if month >= 0 and day ** month == year:
        equations.append(f"{day}^{month} = {year}")

    return equations
