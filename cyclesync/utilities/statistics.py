"""
Statistics report for CycleSync.
Summarises logged sessions: overall averages, phase breakdown and recent trend.
"""
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Optional
import json
import logging

from cyclesync.infra.Json_Store import JsonFileStore
from cyclesync.infra.Log_Repository import LogRepository
from cyclesync.logic.reporting.insights import (
    build_insights_stats, build_metrics_series, filter_logs_by_month, month_key,
)
from cyclesync.utilities.dates import to_local_date_string

logger = logging.getLogger(__name__)

MAX_BAR_WIDTH = 50


def _fmt(value: Optional[float], suffix: str = "") -> str:
    return "–" if value is None else f"{value:.1f}{suffix}"


class CycleStats:
    """Generate statistics and insights from the stored journal."""

    def __init__(self, data_dir: Path):
        self.logs = LogRepository(JsonFileStore(data_dir))

    def plan_adherence(self) -> Dict[str, int]:
        """How many dated entries had a planned session, and where it came from."""
        counts = {"with_plan": 0, "from_plan": 0, "manual": 0, "unplanned": 0}
        for entry in self.logs.load_logs():
            if not entry.date:
                continue
            if entry.planned:
                counts["with_plan"] += 1
                if entry.planned_source == "plan":
                    counts["from_plan"] += 1
                elif entry.planned_source == "manual":
                    counts["manual"] += 1
            else:
                counts["unplanned"] += 1
        return counts

    def generate_report(self, today: date) -> Dict:
        """Generate comprehensive statistics report."""
        logs = self.logs.load_logs()
        current_month = month_key(to_local_date_string(today))
        return {
            **build_insights_stats(logs),
            'current_month': current_month,
            'current_month_series': build_metrics_series(filter_logs_by_month(logs, current_month)),
            'plan_adherence': self.plan_adherence(),
            'generated_at': datetime.now().isoformat()
        }

    def print_report(self, today: date):
        """Print a formatted statistics report."""
        report = self.generate_report(today)
        overall = report['overall']

        print("\n" + "="*60)
        print("📊 CYCLESYNC TRAINING REPORT")
        print("="*60)

        print(f"\n📝 ENTRIES: {overall['total_entries']} across {overall['days_with_logs']} days")
        print(f"  Energy: {_fmt(overall['avg_energy'])}")
        print(f"  RPE:    {_fmt(overall['avg_rpe'])}")
        print(f"  Sleep:  {_fmt(overall['avg_sleep'], ' h')}")

        print("\n🌙 BY PHASE:")
        for p in report['phases']:
            print(f"  {p['phase']:15s}: {p['entries']:3d} entries | energy {_fmt(p['avg_energy'])}"
                  f" | RPE {_fmt(p['avg_rpe'])} | sleep {_fmt(p['avg_sleep'], ' h')}")

        print(f"\n📈 {report['current_month']} ({len(report['current_month_series'])} points):")
        for point in report['current_month_series']:
            bar = "█" * min(int(point.get('energy', 0)), MAX_BAR_WIDTH)
            print(f"  {point['date']}: {bar} {point.get('phase', '')}")

        adherence = report['plan_adherence']
        print("\n📅 PLAN:")
        print(f"  With a planned session: {adherence['with_plan']}"
              f" (from plan {adherence['from_plan']}, edited {adherence['manual']})")
        print(f"  Unplanned:              {adherence['unplanned']}")

        print("\n" + "="*60)
        print(f"Report generated: {report['generated_at']}")
        print("="*60 + "\n")


# CLI interface
if __name__ == "__main__":
    from cyclesync.infra.paths import DATA_DIR

    logging.basicConfig(level=logging.INFO)
    stats = CycleStats(DATA_DIR)
    stats.print_report(date.today())

    # Save JSON report
    report = stats.generate_report(date.today())
    output_file = Path("cyclesync_stats.json")
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    print(f"✓ Detailed report saved to: {output_file}")
