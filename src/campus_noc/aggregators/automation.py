"""Automation task summary."""

import math
from campus_noc.models import AutomationTask, AutomationView, RecentTask, TaskStatus
from campus_noc.utils.numeric import non_negative_int, percent_of
from campus_noc.utils.validation import as_dict, as_list, validate_records
from datetime import datetime, timezone
from typing import Any, Sequence


RECENT_TASK_LIMIT = 5
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def summarize_automation(tasks: Sequence[AutomationTask]) -> AutomationView:
    """Summarize automation tasks already scoped to the selected range.

    Tasks whose status is neither success nor failed count towards the total
    only, so success + failed <= total.
    """
    success = 0
    failed = 0
    by_type: dict[str, int] = {}

    for task in tasks:
        status = task.known_status
        if status == TaskStatus.SUCCESS:
            success += 1
        elif status == TaskStatus.FAILED:
            failed += 1
        by_type[task.task_type] = by_type.get(task.task_type, 0) + 1

    return AutomationView(
        total=len(tasks),
        success=success,
        failed=failed,
        success_rate=percent_of(success, len(tasks)),
        by_type=by_type,
        recent=recent_tasks(tasks),
    )


def summarize_automation_payload(payload: Any) -> tuple[AutomationView, int]:
    """Build the automation view from the backend's summary payload.

    The backend either sends raw ``tasks`` or a pre-aggregated summary with
    ``total``/``success``/``failed``/``byType``/``recent``. Supplied counts
    win and missing counts are derived from the task records that came along.
    Per-type counts are only derived from a full ``tasks`` list; the
    ``recent`` sample feeds the recent tasks table alone, so a summary
    without ``byType`` has no per-type counts.

    Returns:
        Tuple of (AutomationView, number of malformed task records dropped)
    """
    payload = as_dict(payload)
    full_tasks = as_list(payload.get('tasks'))
    raw_tasks = full_tasks or as_list(payload.get('recent'))
    tasks, dropped = validate_records(AutomationTask, raw_tasks, 'automation')
    derived = summarize_automation(tasks)

    total = non_negative_int(payload.get('total'), derived.total)
    success = non_negative_int(payload.get('success'), derived.success)
    failed = non_negative_int(payload.get('failed'), derived.failed)
    if success + failed > total:
        total = success + failed

    supplied_by_type = payload.get('byType', payload.get('by_type'))
    if supplied_by_type is not None:
        by_type = {
            str(task_type): non_negative_int(count)
            for task_type, count in as_dict(supplied_by_type).items()
            if non_negative_int(count, None) is not None
        }
    elif full_tasks:
        by_type = derived.by_type
    else:
        by_type = {}

    view = AutomationView(
        total=total,
        success=success,
        failed=failed,
        success_rate=percent_of(success, total),
        by_type=by_type,
        recent=derived.recent,
    )
    return view, dropped


def recent_tasks(tasks: Sequence[AutomationTask], limit: int = RECENT_TASK_LIMIT) -> list[RecentTask]:
    """Take the most recently started tasks, newest first.

    Tasks without a start time sort last; input order breaks ties.
    """
    ordered = sorted(tasks, key=_start_key, reverse=True)
    return [
        RecentTask(
            task_id=task.task_id,
            task_type=task.task_type,
            device_count=len(task.devices_involved),
            started_at=task.started_at,
            duration_seconds=task_duration(task),
            status=task.status,
        )
        for task in ordered[:limit]
    ]


def task_duration(task: AutomationTask) -> float | None:
    """Duration in seconds, or None when it cannot be known."""
    if task.started_at is None or task.ended_at is None:
        return None
    seconds = (task.ended_at - task.started_at).total_seconds()
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return seconds


def _start_key(task: AutomationTask) -> datetime:
    return task.started_at or _EPOCH

