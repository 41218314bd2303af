"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; business rules live in the services.
"""

import importlib
from datetime import date

from timetrack.config import get_settings_module
from timetrack.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    dashboard = container.dashboard_service.build(today=date.today())
    for summary in dashboard.projects:
        print(summary.project.name, summary.stats.status_label, summary.logged_hours, "/", summary.planned_hours)

    week = container.calendar_service.build(user_id=1, view="week")
    print(week.label, week.total_hours)


if __name__ == "__main__":
    main()
