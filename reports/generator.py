"""Text and image reports for date analysis results"""
from typing import Dict, List, Optional, Tuple
from PIL import Image, ImageColor, ImageDraw, ImageFont
import io
import os
import logging

from config.settings import settings
from date_analyzer.models import AnalysisResult

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

# Short explanations shown next to each pattern
PATTERN_DESCRIPTIONS: Dict[str, str] = {
    'prime': "A prime number has no divisors other than 1 and itself. Examples: 2, 3, 5, 7, 11...",
    'palindrome': "Numbers that read the same forwards and backwards. Examples: 121, 1331, 12321...",
    'pythagorean': "Three numbers where a² + b² = c². Famous example: 3² + 4² = 5²",
    'perfect_power': "Numbers that equal another number raised to a power. Example: 8 = 2³, 16 = 4²",
    'narcissistic': (
        "Numbers equal to the sum of their digits raised to the power of digit count. "
        "Example: 371 = 3³ + 7³ + 1³"
    ),
    'equations': "Mathematical relationships between day, month, and year using +, -, ×, ÷, or ^",
    'hex_colors': "Your date values converted to hexadecimal color codes, creating unique colors from your date.",
    'hsl_colors': "Colors using Hue, Saturation, Lightness values derived from your date components.",
}

FONT_PATHS = [
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "C:/Windows/Fonts/arial.ttf",  # Windows
]


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return MONTH_NAMES[month - 1]


def format_month(month: int) -> str:
    """Picker label such as 01 - January"""
    return f"{month:02d} - {month_name(month)}"


def _found(values: List, empty: str = '✗ None found') -> str:
    if not values:
        return empty
    return f"✓ Found: {', '.join(str(v) for v in values)}"


def _load_font(size: int):
    for path in FONT_PATHS:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, size)
            except OSError as e:
                logger.warning(f"Could not load font {path}: {e}")
    return ImageFont.load_default()


class ReportGenerator:
    """Renders an AnalysisResult as text or as a colour swatch image"""

    def __init__(self, swatch_size: Optional[int] = None):
        self.swatch_size = swatch_size or settings.swatch_size

    def generate_text_report(self, result: AnalysisResult, explain: bool = False) -> str:
        """Generates a plain-text report"""
        date = result.original_date
        powers = [f"{p.num}={p.base}^{p.power}" for p in result.perfect_power]

        if result.pythagorean:
            pythagorean = f"✓ {date.day}² + {date.month}² = {date.year}²"
        else:
            pythagorean = '✗ Not a triple'

        sections = [
            ('prime', '🔢 Prime Numbers', _found(list(result.prime))),
            ('palindrome', '🔄 Palindromes', _found(list(result.palindrome))),
            ('pythagorean', '📐 Pythagorean Triple', pythagorean),
            ('perfect_power', '⚡ Perfect Powers', _found(powers)),
            ('narcissistic', '💫 Narcissistic Numbers', _found(list(result.narcissistic))),
            ('equations', '🧮 Date Equations', _found(list(result.equations), '✗ No equations')),
            ('hex_colors', '🎨 Hex Colors',
             f"{result.hex_colors.mmddyy} (MM/DD/YY), {result.hex_colors.ddmmyy} (DD/MM/YY)"),
            ('hsl_colors', '🌈 HSL Colors',
             f"{result.hsl_colors.mmddyy} (MM/DD/YY), {result.hsl_colors.ddmmyy} (DD/MM/YY)"),
        ]

        lines = [
            "MATH DATE",
            f"📅 {date.month}/{date.day}/{date.year}",
            "━" * 40,
        ]
        for key, title, text in sections:
            lines.append(f"{title}: {text}")
            if explain:
                lines.append(f"   {PATTERN_DESCRIPTIONS[key]}")

        return "\n".join(lines) + "\n"

    def _swatches(self, result: AnalysisResult) -> List[Tuple[str, str]]:
        return [
            (result.hex_colors.mmddyy, 'MM/DD/YY'),
            (result.hex_colors.ddmmyy, 'DD/MM/YY'),
            (result.hsl_colors.mmddyy, 'hsl MM/DD/YY'),
            (result.hsl_colors.ddmmyy, 'hsl DD/MM/YY'),
        ]

    def generate_color_swatches(self, result: AnalysisResult) -> bytes:
        """Generates a PNG with one swatch per derived colour"""
        size = self.swatch_size
        margin = size // 8
        label_height = size // 3
        swatches = self._swatches(result)

        width = len(swatches) * (size + margin) + margin
        height = size + label_height + 2 * margin
        img = Image.new('RGB', (width, height), color='white')
        draw = ImageDraw.Draw(img)
        font = _load_font(max(10, size // 12))

        for index, (color, label) in enumerate(swatches):
            x = margin + index * (size + margin)
            y = margin
            draw.rectangle(
                [x, y, x + size, y + size],
                fill=ImageColor.getrgb(color), outline=(0, 0, 0), width=2
            )

            for offset, text in enumerate((color, label)):
                bbox = draw.textbbox((0, 0), text, font=font)
                text_width = bbox[2] - bbox[0]
                text_height = bbox[3] - bbox[1]
                draw.text(
                    (x + (size - text_width) // 2, y + size + 4 + offset * (text_height + 4)),
                    text,
                    fill=(0, 0, 0),
                    font=font
                )

        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        img_bytes.seek(0)

        return img_bytes.getvalue()
