"""Report rendering tests."""

import io

import pytest
from PIL import Image

from date_analyzer import analyze
from reports import PATTERN_DESCRIPTIONS, ReportGenerator, format_month, month_name


@pytest.fixture
def generator():
    return ReportGenerator(swatch_size=64)


def test_month_labels():
    assert month_name(1) == 'January'
    assert format_month(9) == '09 - September'
    with pytest.raises(ValueError):
        month_name(13)


def test_text_report_lines(generator):
    report = generator.generate_text_report(analyze(3, 4, 5))

    assert "📅 4/3/5" in report
    assert "Prime Numbers: ✓ Found: 3, 5" in report
    assert "Pythagorean Triple: ✓ 3² + 4² = 5²" in report
    assert "Date Equations: ✗ No equations" in report
    assert PATTERN_DESCRIPTIONS['prime'] not in report


def test_text_report_perfect_powers_and_empty_sections(generator):
    report = generator.generate_text_report(analyze(27, 9, 2025))

    assert "9272025=3045^2" in report
    assert "Pythagorean Triple: ✗ Not a triple" in report


def test_text_report_with_explanations(generator):
    report = generator.generate_text_report(analyze(2, 3, 5), explain=True)

    assert "Date Equations: ✓ Found: 2 + 3 = 5" in report
    for description in PATTERN_DESCRIPTIONS.values():
        assert description in report


def test_color_swatches_png(generator):
    result = analyze(5, 1, 2024)
    data = generator.generate_color_swatches(result)

    image = Image.open(io.BytesIO(data))
    assert image.format == 'PNG'
    # four swatches with margins of size // 8
    assert image.size[0] == 4 * (64 + 8) + 8
    # first swatch is filled with the mmddyy hex colour
    assert image.convert('RGB').getpixel((8 + 32, 8 + 32)) == (0x57, 0x7d, 0x76)
