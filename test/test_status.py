#!/usr/bin/env python3
import unittest

from teams_handler.status import (
    status_color,
    status_history,
    status_icon,
    status_label,
    status_marker,
    status_theme_color,
)


class TestStatusMapper(unittest.TestCase):
    def test_known_statuses(self):
        self.assertEqual(status_label(0), "Resolved")
        self.assertEqual(status_label(1), "Warning")
        self.assertEqual(status_label(2), "Critical")

        self.assertEqual(status_color(0), "green")
        self.assertEqual(status_color(1), "yellow")
        self.assertEqual(status_color(2), "red")

        self.assertEqual(status_icon(0), "✅")
        self.assertEqual(status_icon(1), "⚠")
        self.assertEqual(status_icon(2), "❌")

    def test_default_branch_is_total(self):
        for status in (3, 127, 2**32 - 1, 2**40, -1):
            self.assertEqual(status_label(status), "Undefined", f"status={status}")
            self.assertEqual(status_color(status), "yellow")
            self.assertEqual(status_icon(status), "⚠")

    def test_non_integer_status_falls_back(self):
        self.assertEqual(status_label(None), "Undefined")
        self.assertEqual(status_label("abc"), "Undefined")
        self.assertEqual(status_label("2"), "Critical")

    def test_theme_color_and_marker(self):
        self.assertEqual(status_theme_color(2), "FF0000")
        self.assertEqual(status_theme_color(0), "00FF00")
        self.assertEqual(status_theme_color(9), "FFFF00")
        self.assertEqual(status_marker(2), "\U0001f534")

    def test_history_empty(self):
        self.assertEqual(status_history(()), "")

    def test_history_order_and_count(self):
        rendered = status_history((0, 1, 2, 7))
        tokens = rendered.split(" ")
        # um separador por entrada, inclusive a última
        self.assertEqual(tokens[-1], "")
        self.assertEqual(tokens[:-1], ["✅", "⚠", "❌", "⚠"])

    def test_history_with_markers(self):
        rendered = status_history((2, 0), glyph=status_marker)
        self.assertEqual(rendered, "\U0001f534 \U0001f7e2 ")


if __name__ == '__main__':
    unittest.main()
