import unittest
from cyclesync.logic.logs.normalizer import normalize_log_entry
from cyclesync.logic.reporting.month_view import build_calendar_month, phase_key_for_date, phase_color


class TestMonthView(unittest.TestCase):

    def test_grid_is_monday_first(self):
        # November 2025 starts on a Saturday
        weeks = build_calendar_month(2025, 11, [])
        self.assertTrue(all(len(w) == 7 for w in weeks))
        self.assertEqual([c["day"] for c in weeks[0]], [0, 0, 0, 0, 0, 1, 2])
        self.assertEqual(weeks[0][5]["date"], "2025-11-01")
        self.assertEqual(weeks[-1][0]["date"], "2025-11-24")

    def test_phase_keys(self):
        logs = [normalize_log_entry(r) for r in (
            {"date": "2025-11-03", "phase": "Luteal"},
            {"date": "2025-11-03", "phase": " Luteal "},
            {"date": "2025-11-04", "phase": "Luteal"},
            {"date": "2025-11-04", "phase": "Deload"},
            {"date": "2025-11-05"},
        )]
        cells = {c["date"]: c for w in build_calendar_month(2025, 11, logs) for c in w if c["date"]}
        self.assertEqual(cells["2025-11-03"]["phase_key"], "Luteal")
        self.assertEqual(cells["2025-11-04"]["phase_key"], "mixed")
        self.assertEqual(cells["2025-11-05"]["phase_key"], "unlabeled")
        self.assertTrue(cells["2025-11-05"]["has_log"])
        self.assertFalse(cells["2025-11-06"]["has_log"])
        self.assertIsNone(cells["2025-11-06"]["phase_key"])

    def test_phase_key_and_colors(self):
        self.assertEqual(phase_key_for_date([]), "unlabeled")
        self.assertEqual(phase_color("Menstrual"), "#f97373")
        self.assertEqual(phase_color("mixed"), "#64748b")
        self.assertEqual(phase_color("Custom block"), "#3b82f6")


if __name__ == '__main__':
    unittest.main()
