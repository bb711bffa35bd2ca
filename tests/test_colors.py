"""
TASKPACE API - Calendar Color Tests
"""

from taskpace.calendar.colors import TASK_COLORS, color_for_task, lighten, subtask_color


class TestColorForTask:
    """Tests for deterministic palette assignment."""

    def test_sum_of_char_codes_selects_palette_entry(self):
        """'abc' sums to 294, which is palette index 4."""
        assert color_for_task("abc") == TASK_COLORS[4]

    def test_same_id_same_color(self):
        """Colors are stable across calls."""
        assert color_for_task("task-1") == color_for_task("task-1")
        assert color_for_task("task-1") == "#A9CCE3"

    def test_anagrams_share_a_color(self):
        """Collisions are tolerated: permutations of an id share a color."""
        assert color_for_task("abc") == color_for_task("cba")

    def test_empty_id_uses_first_color(self):
        assert color_for_task("") == TASK_COLORS[0]

    def test_palette_has_ten_colors(self):
        assert len(TASK_COLORS) == 10


class TestLighten:
    """Tests for the subtask shade derivation."""

    def test_lighten_black_by_30_percent(self):
        """round(2.55 * 30) = 77 is added to every channel."""
        assert lighten("#000000", 30) == "#4d4d4d"

    def test_channels_clamp_at_255(self):
        assert lighten("#000000", 100) == "#ffffff"
        assert lighten("#FFEAA7", 30) == "#fffff4"

    def test_zero_percent_keeps_color(self):
        assert lighten("#A9CCE3", 0) == "#a9cce3"

    def test_negative_percent_clamps_at_zero(self):
        assert lighten("#101010", -50) == "#000000"

    def test_subtask_color_is_lightened_parent_color(self):
        assert subtask_color("task-1") == lighten(color_for_task("task-1"), 30)
        assert subtask_color("task-1") == "#f6ffff"
