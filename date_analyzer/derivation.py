"""Candidate numbers derived from a date"""
from typing import List


def _pad(value: int) -> str:
    return str(value).zfill(2)


def derive_candidates(day: int, month: int, year: int) -> List[int]:
    """Builds the candidate set: raw components plus four concatenations.

    Concatenations are parsed back to integers, so a leading zero
    (e.g. "010524") is dropped.
    """
    dd = _pad(day)
    mm = _pad(month)
    yy = _pad(year % 100)
    yyyy = str(year)

    concatenated = [
        int(mm + dd + yy),
        int(dd + mm + yy),
        int(mm + dd + yyyy),
        int(dd + mm + yyyy),
    ]
    return [day, month, year] + concatenated
