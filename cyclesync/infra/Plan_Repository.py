"""Plan repository: multi-week plan persistence with legacy single-week migration."""
import logging
from datetime import date
from typing import Optional

from cyclesync.domain.Plan import (
    PlanState, WeekPlan, create_initial_plan_state, create_week, ensure_week_in_state, find_week,
)
from cyclesync.infra import paths
from cyclesync.infra.Json_Store import JsonFileStore
from cyclesync.utilities.constants import LEGACY_KEY_PLAN_V1, STORAGE_KEY_PLAN_V2
from cyclesync.utilities.dates import monday_of

logger = logging.getLogger(__name__)


class PlanRepository:
    def __init__(self, store: Optional[JsonFileStore] = None):
        self.store = store or JsonFileStore(paths.DATA_DIR)

    def _load_stored_state(self) -> Optional[PlanState]:
        raw = self.store.load(STORAGE_KEY_PLAN_V2)
        if isinstance(raw, dict) and isinstance(raw.get("weeks"), list) and raw["weeks"]:
            return PlanState.from_dict(raw)
        return None

    def _migrate_legacy(self, today: date) -> Optional[PlanState]:
        """Wrap a stored single-week plan into the multi-week format and save it."""
        legacy = self.store.load(LEGACY_KEY_PLAN_V1)
        if not isinstance(legacy, dict):
            return None
        parsed = WeekPlan.from_dict(legacy)
        week_start = parsed.week_start or monday_of(today)
        migrated = WeekPlan(
            week_start,
            parsed.focus,
            parsed.days if len(parsed.days) == 7 else create_week(week_start).days,
        )
        state = PlanState([migrated])
        self.save_state(state)
        logger.info(f"Migrated legacy single-week plan ({week_start}) to {STORAGE_KEY_PLAN_V2}")
        return state

    def load_state(self, today: date) -> PlanState:
        """Stored plan, else the migrated legacy week, else one empty week for today."""
        state = self._load_stored_state() or self._migrate_legacy(today)
        if state is None:
            state = create_initial_plan_state(today)
        return state

    def load_state_for_suggestions(self) -> Optional[PlanState]:
        """Plan used to pre-fill new log entries; None when nothing was ever stored."""
        state = self._load_stored_state()
        if state is not None:
            return state
        legacy = self.store.load(LEGACY_KEY_PLAN_V1)
        if isinstance(legacy, dict):
            return PlanState([WeekPlan.from_dict(legacy)])
        return None

    def save_state(self, state: PlanState) -> None:
        self.store.save(STORAGE_KEY_PLAN_V2, state.to_dict())

    def get_week(self, week_start: str, today: date) -> WeekPlan:
        """Return the week starting at ``week_start``, creating and saving it on first use."""
        state = self.load_state(today)
        weeks = ensure_week_in_state(state.weeks, week_start)
        if weeks is not state.weeks:
            state.weeks = weeks
            self.save_state(state)
            logger.info(f"Created plan week {week_start}")
        return find_week(state.weeks, week_start)

    def set_focus(self, week_start: str, focus: str, today: date) -> WeekPlan:
        state = self.load_state(today)
        state.weeks = ensure_week_in_state(state.weeks, week_start)
        week = find_week(state.weeks, week_start)
        week.focus = focus
        self.save_state(state)
        return week

    def set_day_planned(self, week_start: str, day_index: int, planned: str, today: date) -> WeekPlan:
        if not 0 <= day_index < 7:
            raise ValueError(f"Day index out of range: {day_index}")
        state = self.load_state(today)
        state.weeks = ensure_week_in_state(state.weeks, week_start)
        week = find_week(state.weeks, week_start)
        if len(week.days) != 7:
            week.days = create_week(week_start).days
        week.days[day_index].planned = planned
        self.save_state(state)
        return week
