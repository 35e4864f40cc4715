from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DAYS: Final[list[str]] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

PRESET_PHASES: Final[list[str]] = ["Menstrual", "Follicular", "Ovulatory", "Luteal"]
UNLABELED_PHASE: Final[str] = "Unlabeled"
PLANNED_SOURCES: Final[tuple[str, ...]] = ("plan", "manual")

# Storage keys (one JSON file per key)
STORAGE_KEY_LOGS: Final[str] = "cyclesync_mobile_logs_v1"
STORAGE_KEY_PLAN_V2: Final[str] = "cyclesync_mobile_plan_v2"
LEGACY_KEY_PLAN_V1: Final[str] = "cyclesync_mobile_plan_v1"

# Calendar dot colours
PHASE_COLORS: Final[dict[str, str]] = {
    "Menstrual": "#f97373",
    "Follicular": "#34d399",
    "Ovulatory": "#facc15",
    "Luteal": "#a78bfa",
    "mixed": "#64748b",
    "unlabeled": "#94a3b8",
}
CUSTOM_PHASE_COLOR: Final[str] = "#3b82f6"
