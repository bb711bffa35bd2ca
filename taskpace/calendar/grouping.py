"""
TASKPACE API - Calendar Grouping

Buckets calendar items by day and nests a task with its same-day subtasks
for display.
"""

from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Set, Tuple

from taskpace.calendar.dates import date_key
from taskpace.calendar.enums import DisplayGroupType, ItemType
from taskpace.calendar.schemas import CalendarItem, DisplayGroup
from taskpace.tasks.deadlines import parse_deadline


def group_by_date(items: List[CalendarItem], tz: tzinfo = timezone.utc) -> Dict[str, List[CalendarItem]]:
    """
    Bucket items by the day key of their deadline.

    Within a bucket tasks come before subtasks, then earlier deadlines first.
    The sort is stable, so ties keep projection order.

    Raises:
        InvalidDeadlineError: if any item's deadline cannot be parsed
    """
    buckets: Dict[str, List[Tuple[datetime, CalendarItem]]] = {}

    for item in items:
        instant = parse_deadline(item.deadline, tz)
        buckets.setdefault(date_key(instant, tz), []).append((instant, item))

    grouped: Dict[str, List[CalendarItem]] = {}
    for key, bucket in buckets.items():
        ordered = sorted(bucket, key=lambda entry: (entry[1].type != ItemType.TASK, entry[0]))
        grouped[key] = [item for _, item in ordered]
    return grouped


def group_for_display(day_items: List[CalendarItem]) -> List[DisplayGroup]:
    """
    Nest each task with any of its own subtasks present in the same day.

    A subtask whose task is not in the list is emitted on its own. Every
    item lands in exactly one group.
    """
    groups: List[DisplayGroup] = []
    # Positions, not ids, so colliding ids cannot swallow an item
    processed: Set[int] = set()

    for index, item in enumerate(day_items):
        if index in processed:
            continue
        processed.add(index)

        if item.type == ItemType.TASK:
            related = [
                position
                for position, candidate in enumerate(day_items)
                if position not in processed
                and candidate.type == ItemType.SUBTASK
                and candidate.parent_task_id == item.id
            ]
            if related:
                processed.update(related)
                groups.append(
                    DisplayGroup(
                        type=DisplayGroupType.TASK_WITH_SUBTASKS,
                        main_item=item,
                        sub_items=[day_items[position] for position in related],
                    )
                )
            else:
                groups.append(DisplayGroup(type=DisplayGroupType.SINGLE_TASK, main_item=item))
        else:
            groups.append(DisplayGroup(type=DisplayGroupType.SINGLE_SUBTASK, main_item=item))

    return groups
