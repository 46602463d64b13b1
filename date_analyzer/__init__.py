"""Date numerology analysis engine"""
from .analyzer import DateAnalyzer, analyze
from .exceptions import ValidationError
from .models import AnalysisResult, ColorPair, DateInput, PerfectPowerMatch

__all__ = [
    'DateAnalyzer',
    'analyze',
    'ValidationError',
    'AnalysisResult',
    'ColorPair',
    'DateInput',
    'PerfectPowerMatch',
]
