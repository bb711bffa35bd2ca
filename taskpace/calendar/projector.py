"""
TASKPACE API - Calendar Item Projector

Flattens tasks into calendar items: one per task followed by one per
subtask, tasks in input order.
"""

from typing import List, Optional, Tuple

from taskpace.calendar.colors import color_for_task, subtask_color
from taskpace.calendar.enums import ItemType
from taskpace.calendar.schemas import CalendarItem
from taskpace.tasks.models import Task, Subtask


def subtask_item_id(task_id: str, subtask_id: int) -> str:
    """Calendar item id of a subtask, derived from its parent and own id."""
    return f"{task_id}-{subtask_id}"


def project_to_calendar_items(tasks: List[Task]) -> List[CalendarItem]:
    items: List[CalendarItem] = []

    for task in tasks:
        items.append(
            CalendarItem(
                id=task.id,
                title=task.title,
                type=ItemType.TASK,
                deadline=task.deadline,
                done=task.done,
                color=color_for_task(task.id),
            )
        )

        sub_color = subtask_color(task.id)
        for subtask in task.subtasks:
            items.append(
                CalendarItem(
                    id=subtask_item_id(task.id, subtask.id),
                    title=subtask.title,
                    type=ItemType.SUBTASK,
                    deadline=subtask.deadline,
                    done=subtask.done,
                    parent_task_id=task.id,
                    parent_task_title=task.title,
                    color=sub_color,
                )
            )

    return items


def find_source(item_id: str, tasks: List[Task]) -> Optional[Tuple[Task, Optional[Subtask]]]:
    """
    Resolve a calendar item id back to the task (and subtask) it came from.

    Task ids win over subtask ids. Returns None when nothing matches.
    """
    for task in tasks:
        if task.id == item_id:
            return task, None

    for task in tasks:
        for subtask in task.subtasks:
            if subtask_item_id(task.id, subtask.id) == item_id:
                return task, subtask

    return None
