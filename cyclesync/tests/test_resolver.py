import copy
import unittest
from cyclesync.domain.Plan import PlanState, create_week
from cyclesync.logic.plan.resolver import resolve_planned_session


def _week(week_start, planned_by_index):
    week = create_week(week_start)
    for i, text in planned_by_index.items():
        week.days[i].planned = text
    return week


class TestResolvePlannedSession(unittest.TestCase):

    def setUp(self):
        self.plan = PlanState([_week("2025-11-10", {2: "Pole - power tricks"})])

    def test_primary_match(self):
        self.assertEqual(resolve_planned_session("2025-11-12", self.plan), "Pole - power tricks")

    def test_no_week_for_date(self):
        self.assertIsNone(resolve_planned_session("2025-11-17", self.plan))

    def test_empty_slot_in_matching_week(self):
        self.assertIsNone(resolve_planned_session("2025-11-13", self.plan))

    def test_invalid_inputs(self):
        self.assertIsNone(resolve_planned_session("", self.plan))
        self.assertIsNone(resolve_planned_session("2025-13-45", self.plan))
        self.assertIsNone(resolve_planned_session("2025-11-12", None))
        self.assertIsNone(resolve_planned_session("2025-11-12", PlanState()))

    def test_fallback_for_mislabeled_week(self):
        # weekStart is a Tuesday, so no week is keyed by the query date's Monday
        plan = PlanState([_week("2025-01-07", {2: "Hill repeats"})])
        self.assertEqual(resolve_planned_session("2025-01-09", plan), "Hill repeats")

    def test_fallback_when_primary_slot_is_empty(self):
        plan = PlanState([
            _week("2025-11-10", {}),
            _week("2025-11-11", {1: "Legacy session"}),
        ])
        self.assertEqual(resolve_planned_session("2025-11-12", plan), "Legacy session")

    def test_primary_wins_over_earlier_covering_week(self):
        plan = PlanState([
            _week("2025-11-11", {1: "Legacy session"}),
            _week("2025-11-10", {2: "Aligned session"}),
        ])
        self.assertEqual(resolve_planned_session("2025-11-12", plan), "Aligned session")

    def test_duplicates_first_in_stored_order_wins(self):
        plan = PlanState([
            _week("2025-11-10", {2: "First"}),
            _week("2025-11-10", {2: "Second"}),
        ])
        self.assertEqual(resolve_planned_session("2025-11-12", plan), "First")

    def test_skips_weeks_with_bad_start_or_short_days(self):
        broken = create_week("not-a-date")
        broken.days[0].planned = "never"
        short = _week("2025-11-10", {0: "Mon only"})
        short.days = short.days[:1]
        plan = PlanState([broken, short])
        self.assertEqual(resolve_planned_session("2025-11-10", plan), "Mon only")
        self.assertIsNone(resolve_planned_session("2025-11-12", plan))

    def test_does_not_mutate_plan(self):
        before = copy.deepcopy(self.plan.to_dict())
        resolve_planned_session("2025-11-12", self.plan)
        resolve_planned_session("2025-11-30", self.plan)
        self.assertEqual(self.plan.to_dict(), before)


if __name__ == '__main__':
    unittest.main()
