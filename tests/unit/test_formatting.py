"""Unit tests for percentage formatting and progress bars."""

import pytest

from ccstatusline.utils.formatting import (
    EMPTY_CHAR,
    FILLED_CHAR,
    format_percentage,
    render_progress_bar,
    render_progress_bar_with_label,
)


@pytest.mark.unit
class TestFormatPercentage:
    """Tests for format_percentage."""

    def test_one_decimal_by_default(self):
        assert format_percentage(21.0) == "21.0%"
        assert format_percentage(4.2) == "4.2%"

    def test_exact_halves_round_up(self):
        assert format_percentage(26.25) == "26.3%"
        assert format_percentage(73.75) == "73.8%"
        assert format_percentage(5.25) == "5.3%"

    def test_float_noise_is_absorbed(self):
        assert format_percentage(42000 / 200000 * 100) == "21.0%"
        assert format_percentage(100 - 42000 / 200000 * 100) == "79.0%"

    def test_custom_decimals(self):
        assert format_percentage(67.456, decimals=2) == "67.46%"
        assert format_percentage(50, decimals=0) == "50%"


@pytest.mark.unit
class TestRenderProgressBar:
    """Tests for render_progress_bar."""

    def test_scenario_21_percent_of_32(self):
        assert render_progress_bar(21.0, 32) == "██████░░░░░░░░░░░░░░░░░░░░░░░░░░"

    @pytest.mark.parametrize("percentage", [0, 0.5, 9.3, 33.3, 50, 73.9, 99.9, 100])
    @pytest.mark.parametrize("width", [1, 7, 16, 32])
    def test_width_and_fill_count(self, percentage, width):
        bar = render_progress_bar(percentage, width)
        assert len(bar) == width
        assert bar.count(FILLED_CHAR) == int(percentage / 100 * width)
        assert bar == FILLED_CHAR * bar.count(FILLED_CHAR) + EMPTY_CHAR * bar.count(
            EMPTY_CHAR
        )

    def test_empty_and_full(self):
        assert render_progress_bar(0, 16) == EMPTY_CHAR * 16
        assert render_progress_bar(100, 16) == FILLED_CHAR * 16

    def test_out_of_range_is_clamped(self):
        assert render_progress_bar(150, 8) == FILLED_CHAR * 8
        assert render_progress_bar(-20, 8) == EMPTY_CHAR * 8

    def test_custom_characters(self):
        assert render_progress_bar(50, 4, filled_char="#", empty_char="-") == "##--"


@pytest.mark.unit
class TestRenderProgressBarWithLabel:
    """Tests for render_progress_bar_with_label."""

    def test_label_centred_in_larger_empty_segment(self):
        # 3 filled, 13 empty: offset 3 + (13 - 5) // 2 = 7
        assert render_progress_bar_with_label(21.0, 16) == "███░░░░21.0%░░░░"

    def test_label_centred_in_larger_filled_segment(self):
        # 12 filled, 4 empty: offset (12 - 5) // 2 = 3
        assert render_progress_bar_with_label(75.0, 16) == "███75.0%████░░░░"

    def test_tie_places_label_in_filled_segment(self):
        # 8 filled, 8 empty: label starts at (8 - 5) // 2 = 1
        assert render_progress_bar_with_label(50.0, 16) == "█50.0%██░░░░░░░░"

    def test_zero_percent(self):
        # 0 filled, 16 empty: offset (16 - 4) // 2 = 6
        assert render_progress_bar_with_label(0, 16) == "░░░░░░0.0%░░░░░░"

    def test_full_bar(self):
        assert render_progress_bar_with_label(100, 16) == "█████100.0%█████"

    def test_keeps_bar_width(self):
        for percentage in (0, 12.5, 21.0, 49.9, 50, 63.2, 99.9, 100):
            assert len(render_progress_bar_with_label(percentage, 16)) == 16

    def test_label_wider_than_bar_is_truncated(self):
        assert render_progress_bar_with_label(21.0, 4) == "21.0"
        assert render_progress_bar_with_label(100, 5) == "100.0"

    def test_label_equal_to_bar_width_returns_label(self):
        assert render_progress_bar_with_label(21.0, 5) == "21.0%"

    def test_label_never_runs_off_the_bar(self):
        # 3 filled, 3 empty: centring would start before the bar
        result = render_progress_bar_with_label(50.0, 6)
        assert len(result) == 6
        assert result.startswith("50.0%")
