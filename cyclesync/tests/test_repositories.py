import json
import tempfile
import unittest
from datetime import date
from pathlib import Path
from cyclesync.infra.Json_Store import JsonFileStore
from cyclesync.infra.Log_Repository import LogRepository
from cyclesync.infra.Plan_Repository import PlanRepository
from cyclesync.logic.logs.normalizer import normalize_log_entry
from cyclesync.utilities.constants import STORAGE_KEY_LOGS, STORAGE_KEY_PLAN_V2, LEGACY_KEY_PLAN_V1

TODAY = date(2025, 11, 12)


class _TempStoreCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)
        self.store = JsonFileStore(self.data_dir)

    def tearDown(self):
        self._tmp.cleanup()

    def write_raw(self, key, text):
        (self.data_dir / f"{key}.json").write_text(text, encoding="utf-8")


class TestJsonFileStore(_TempStoreCase):

    def test_missing_key_returns_default(self):
        self.assertEqual(self.store.load("nothing", []), [])
        self.assertFalse(self.store.exists("nothing"))

    def test_save_then_load(self):
        self.store.save("k", {"a": [1, 2]})
        self.assertEqual(self.store.load("k"), {"a": [1, 2]})
        self.assertEqual(sorted(p.name for p in self.data_dir.iterdir()), ["k.json"])

    def test_invalid_json_is_treated_as_no_data(self):
        self.write_raw("broken", "{not json")
        with self.assertLogs("cyclesync.infra.Json_Store", level="WARNING"):
            self.assertEqual(self.store.load("broken", []), [])


class TestLogRepository(_TempStoreCase):

    def test_empty_store_is_empty_journal(self):
        self.assertEqual(LogRepository(self.store).load_logs(), [])

    def test_load_normalizes_legacy_records(self):
        self.write_raw(STORAGE_KEY_LOGS, json.dumps([{"id": "a", "date": "2025-01-01", "energy": "3"}, {}]))
        logs = LogRepository(self.store).load_logs()
        self.assertEqual(logs[0].id, "a")
        self.assertIsNone(logs[0].energy)
        self.assertTrue(logs[1].id)

    def test_non_list_payload(self):
        self.write_raw(STORAGE_KEY_LOGS, json.dumps({"logs": []}))
        self.assertEqual(LogRepository(self.store).load_logs(), [])

    def test_add_update_remove_persist_whole_collection(self):
        repo = LogRepository(self.store)
        first = repo.add(normalize_log_entry({"date": "2025-01-01"}))
        second = repo.add(normalize_log_entry({"date": "2025-01-02"}))
        stored = self.store.load(STORAGE_KEY_LOGS)
        self.assertEqual([r["id"] for r in stored], [second.id, first.id])

        updated = repo.update(first.id, {"energy": 4})
        self.assertEqual(updated.energy, 4)
        self.assertIsNone(repo.update("missing", {"energy": 1}))

        self.assertTrue(repo.remove(second.id))
        self.assertFalse(repo.remove(second.id))
        self.assertEqual([l.id for l in repo.load_logs()], [first.id])
        self.assertEqual([l.id for l in repo.for_date("2025-01-01")], [first.id])

    def test_ids_assigned_on_load_are_persisted(self):
        self.write_raw(STORAGE_KEY_LOGS, json.dumps([{"date": "2025-01-01", "energy": 3}, "junk"]))
        repo = LogRepository(self.store)
        first_ids = [l.id for l in repo.load_logs()]
        self.assertEqual([l.id for l in repo.load_logs()], first_ids)
        self.assertEqual([r["id"] for r in self.store.load(STORAGE_KEY_LOGS)], first_ids)

        self.assertEqual(repo.update(first_ids[0], {"rpe": 6}).rpe, 6)
        self.assertTrue(repo.remove(first_ids[1]))
        self.assertEqual([l.id for l in repo.load_logs()], first_ids[:1])

    def test_records_with_ids_are_not_rewritten(self):
        self.write_raw(STORAGE_KEY_LOGS, json.dumps([{"id": "a", "date": "2025-01-01"}]))
        path = self.data_dir / f"{STORAGE_KEY_LOGS}.json"
        before = path.read_text(encoding="utf-8")
        LogRepository(self.store).load_logs()
        self.assertEqual(path.read_text(encoding="utf-8"), before)


class TestPlanRepository(_TempStoreCase):

    def test_initial_state_for_today_not_saved(self):
        repo = PlanRepository(self.store)
        state = repo.load_state(TODAY)
        self.assertEqual([w.week_start for w in state.weeks], ["2025-11-10"])
        self.assertFalse(self.store.exists(STORAGE_KEY_PLAN_V2))
        self.assertIsNone(repo.load_state_for_suggestions())

    def test_legacy_single_week_is_migrated(self):
        legacy = {"weekStart": "2025-01-06", "focus": "Base",
                  "days": [{"name": n, "planned": "Swim" if n == "Wed" else ""}
                           for n in ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]]}
        self.write_raw(LEGACY_KEY_PLAN_V1, json.dumps(legacy))
        state = PlanRepository(self.store).load_state(TODAY)
        self.assertEqual(len(state.weeks), 1)
        self.assertEqual(state.weeks[0].focus, "Base")
        self.assertEqual(state.weeks[0].days[2].planned, "Swim")
        self.assertEqual(self.store.load(STORAGE_KEY_PLAN_V2), state.to_dict())

    def test_legacy_without_start_or_days(self):
        self.write_raw(LEGACY_KEY_PLAN_V1, json.dumps({"focus": "Old", "days": [{"planned": "x"}]}))
        state = PlanRepository(self.store).load_state(TODAY)
        week = state.weeks[0]
        self.assertEqual(week.week_start, "2025-11-10")
        self.assertEqual(len(week.days), 7)
        self.assertEqual(week.days[0].planned, "")

    def test_v2_wins_over_legacy(self):
        self.store.save(STORAGE_KEY_PLAN_V2, {"weeks": [{"weekStart": "2025-11-03", "focus": "", "days": []}]})
        self.write_raw(LEGACY_KEY_PLAN_V1, json.dumps({"weekStart": "2025-01-06"}))
        state = PlanRepository(self.store).load_state(TODAY)
        self.assertEqual([w.week_start for w in state.weeks], ["2025-11-03"])

    def test_week_editing(self):
        repo = PlanRepository(self.store)
        repo.set_day_planned("2025-11-10", 2, "Pole - power tricks", TODAY)
        repo.set_focus("2025-11-17", "Deload", TODAY)
        week = repo.get_week("2025-11-24", TODAY)
        self.assertEqual(week.week_start, "2025-11-24")
        state = repo.load_state(TODAY)
        self.assertEqual([w.week_start for w in state.weeks], ["2025-11-10", "2025-11-17", "2025-11-24"])
        self.assertEqual(state.weeks[0].days[2].planned, "Pole - power tricks")
        self.assertEqual(state.weeks[1].focus, "Deload")
        with self.assertRaises(ValueError):
            repo.set_day_planned("2025-11-10", 7, "x", TODAY)


if __name__ == '__main__':
    unittest.main()
