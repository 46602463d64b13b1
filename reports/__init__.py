"""Report rendering"""
from .generator import ReportGenerator, PATTERN_DESCRIPTIONS, format_month, month_name

__all__ = ['ReportGenerator', 'PATTERN_DESCRIPTIONS', 'format_month', 'month_name']
