"""Engine errors"""
from typing import Dict


class ValidationError(Exception):
    """Date components outside their allowed ranges.

    ``errors`` maps each offending field (``day``, ``month``, ``year``) to a
    human readable message.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__('; '.join(self.errors.values()))
