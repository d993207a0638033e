import itertools

import pytest

from contrastgrid.core import config as c
from contrastgrid.core.contrast import (
    describe_contrast_matrix,
    filter_contrast_matrix,
    format_contrast_ratio,
    generate_contrast_matrix,
    get_color_contrast_result,
    get_contrast_ratio,
    get_contrast_result,
    get_relative_luminance,
    get_wcag_level,
    get_wcag_level_description,
    level_matches_filters,
    meets_wcag_level,
    summarize_contrast_matrix,
)
from contrastgrid.core.conversions import create_color
from contrastgrid.core.types import RGB

BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)
SAMPLES = [BLACK, WHITE, RGB(255, 0, 0), RGB(118, 118, 118), RGB(12, 200, 99), RGB(250, 250, 210)]


def test_relative_luminance_extremes():
    assert get_relative_luminance(BLACK) == 0
    assert get_relative_luminance(WHITE) == pytest.approx(1.0)


def test_relative_luminance_uses_wcag_coefficients():
    assert get_relative_luminance(RGB(255, 0, 0)) == pytest.approx(0.2126)
    assert get_relative_luminance(RGB(0, 255, 0)) == pytest.approx(0.7152)
    assert get_relative_luminance(RGB(0, 0, 255)) == pytest.approx(0.0722)


def test_relative_luminance_linear_segment():
    # 10/255 is below the 0.03928 threshold
    assert get_relative_luminance(RGB(10, 10, 10)) == pytest.approx(10 / 255 / 12.92)


def test_black_on_white_is_maximum():
    assert get_contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)
    for a, b in itertools.product(SAMPLES, repeat=2):
        assert get_contrast_ratio(a, b) <= get_contrast_ratio(BLACK, WHITE)


def test_contrast_ratio_is_commutative():
    for a, b in itertools.combinations(SAMPLES, 2):
        assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)


def test_self_contrast_is_one():
    for rgb in SAMPLES:
        assert get_contrast_ratio(rgb, rgb) == 1


def test_grey_on_white_known_value():
    assert get_contrast_ratio(RGB(118, 118, 118), WHITE) == pytest.approx(4.54, abs=0.01)


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (21.0000000001, "21:1"),
        (1.0, "1:1"),
        (4.5, "4.5:1"),
        (1.1, "1.1:1"),
        (4.546, "4.55:1"),
        (4.499, "4.5:1"),
        (3.999, "4:1"),
        (7.123, "7.12:1"),
    ],
)
def test_format_contrast_ratio(ratio, expected):
    assert format_contrast_ratio(ratio) == expected


@pytest.mark.parametrize(
    "ratio, text_size, expected",
    [
        (7.0, "normal", "AAA"),
        (4.5, "normal", "AA"),
        (3.2, "normal", "AA18"),
        (3.0, "normal", "AA18"),
        (2.99, "normal", "DNP"),
        (4.5, "large", "AAA"),
        (3.2, "large", "AA"),
        (2.99, "large", "DNP"),
        (1.0, "large", "DNP"),
    ],
)
def test_get_wcag_level(ratio, text_size, expected):
    assert get_wcag_level(ratio, text_size) == expected


def test_aa18_only_reachable_for_normal_text():
    ratios = [1 + i * 0.05 for i in range(400)]
    assert "AA18" not in {get_wcag_level(r, "large") for r in ratios}
    assert "AA18" in {get_wcag_level(r, "normal") for r in ratios}


@pytest.mark.parametrize("text_size", ["normal", "large"])
def test_wcag_level_is_monotonic(text_size):
    rank = {"DNP": 0, "AA18": 1, "AA": 2, "AAA": 3}
    ratios = [1 + i * 0.01 for i in range(2001)]
    ranks = [rank[get_wcag_level(r, text_size)] for r in ratios]
    assert ranks == sorted(ranks)


def test_meets_wcag_level():
    assert meets_wcag_level(4.5, "AA", "normal")
    assert not meets_wcag_level(4.49, "AA", "normal")
    assert not meets_wcag_level(6.99, "AAA", "normal")
    assert meets_wcag_level(3.0, "AA", "large")
    assert meets_wcag_level(4.5, "AAA", "large")
    assert meets_wcag_level(3.0, "AA", "ui")


def test_thresholds_table():
    assert c.WCAG_THRESHOLDS["normal"] == {"AA": 4.5, "AAA": 7.0}
    assert c.WCAG_THRESHOLDS["large"] == {"AA": 3.0, "AAA": 4.5}
    assert c.WCAG_THRESHOLDS["ui"] == {"AA": 3.0}


def test_contrast_result_black_on_white():
    result = get_contrast_result(BLACK, WHITE, "normal")
    assert result.ratio == pytest.approx(21)
    assert result.ratio_string == "21:1"
    assert result.level == "AAA"
    assert result.meets_aa is True
    assert result.meets_aaa is True


def test_contrast_result_depends_on_text_size():
    red = RGB(255, 0, 0)
    normal = get_contrast_result(red, WHITE, "normal")
    large = get_contrast_result(red, WHITE, "large")
    assert normal.ratio == large.ratio
    assert normal.ratio_string == "4:1"
    assert (normal.level, normal.meets_aa) == ("AA18", False)
    assert (large.level, large.meets_aa, large.meets_aaa) == ("AA", True, False)


def test_color_contrast_result_matches_rgb_version(white, black):
    assert get_color_contrast_result(black, white) == get_contrast_result(black.rgb, white.rgb)


def test_matrix_shape_and_diagonal(rgb_palette):
    matrix = generate_contrast_matrix(rgb_palette, "normal")
    assert len(matrix) == 3
    assert all(len(row) == 3 for row in matrix)
    for i in range(3):
        assert matrix[i][i].ratio == 1
        assert matrix[i][i].ratio_string == "1:1"


def test_matrix_matches_pairwise_results(rgb_palette):
    matrix = generate_contrast_matrix(rgb_palette, "large")
    for i, fg in enumerate(rgb_palette):
        for j, bg in enumerate(rgb_palette):
            assert matrix[i][j] == get_color_contrast_result(fg, bg, "large")
            assert matrix[i][j].ratio == matrix[j][i].ratio


def test_matrix_of_empty_palette():
    assert generate_contrast_matrix([]) == []


def test_duplicate_hex_values_are_kept_in_matrix():
    palette = [create_color("#123456", "One"), create_color("#123456", "Two")]
    matrix = generate_contrast_matrix(palette)
    assert matrix[0][1].ratio == 1


def test_level_descriptions():
    assert get_wcag_level_description("AAA") == "Enhanced contrast (AAA)"
    assert get_wcag_level_description("AA18") == "Large text only (AA)"
    assert get_wcag_level_description("DNP") == "Does not pass"


def test_summary_counts(rgb_palette):
    matrix = generate_contrast_matrix(rgb_palette, "normal")
    summary = summarize_contrast_matrix(matrix)
    assert summary["total"] == 9
    assert summary["AA"] == 2
    assert summary["DNP"] == 7
    assert summary["passing"] == 2
    assert describe_contrast_matrix(matrix) == (
        "9 color combinations: 2 pass AA or better, 0 pass for large text only, 7 fail."
    )


def test_filter_defaults_hide_failures(rgb_palette):
    matrix = generate_contrast_matrix(rgb_palette, "normal")
    visible = filter_contrast_matrix(matrix)
    shown = [cell for row in visible for cell in row if cell is not None]
    assert len(shown) == 2
    assert all(cell.level == "AA" for cell in shown)
    assert visible[0][0] is None


def test_filter_with_every_level_is_identity(rgb_palette):
    matrix = generate_contrast_matrix(rgb_palette, "normal")
    assert filter_contrast_matrix(matrix, c.GRID_FILTER_LEVELS.keys()) == matrix


def test_level_matches_filters():
    assert level_matches_filters("AA18", ["aa-large"])
    assert level_matches_filters("DNP", ["failed", "aaa"])
    assert not level_matches_filters("AA", ["aaa"])
