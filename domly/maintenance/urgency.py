from __future__ import annotations

from datetime import date, timedelta

from domly.maintenance.records import MaintenanceRecord

URGENT_WINDOW = timedelta(days=7)


def is_urgent(record: MaintenanceRecord, today: date) -> bool:
    """Open work due within the next week, overdue work included.

    Records without a due date are never urgent.
    """
    if record.is_completed or record.due_date is None:
        return False
    return record.due_date <= today + URGENT_WINDOW
