"""Aggregate queries over tasks."""
from collections import Counter
from typing import Any, Dict

from sqlmodel import Session

from taskhub.models.common import utcnow
from taskhub.services.task_service import TaskService


class StatisticsService:
    """Derived analytics computed from the current task collection on every call."""

    def __init__(self, session: Session):
        self.session = session
        self.tasks = TaskService(session)

    def task_statistics(self) -> Dict[str, Any]:
        """
        Summarize all tasks

        Only statuses and priorities that occur appear in the breakdowns.
        A task is overdue when it has a due date strictly in the past and
        is not done.

        Returns:
            {"total", "byStatus", "byPriority", "overdue"}
        """
        tasks = self.tasks.list()
        now = utcnow()

        by_status = Counter(task.status for task in tasks)
        by_priority = Counter(task.priority for task in tasks)
        overdue = sum(
            1 for task in tasks
            if task.due_date is not None and task.due_date < now and task.status != "done"
        )

        return {
            "total": len(tasks),
            "byStatus": dict(by_status),
            "byPriority": dict(by_priority),
            "overdue": overdue,
        }

    def project_statistics(self, project_id: str) -> Dict[str, Any]:
        """
        Summarize the tasks of one project

        The project itself is not looked up; an unknown ID yields zero counts.

        Returns:
            {"totalTasks", "completedTasks", "inProgressTasks", "teamMembers"}
        """
        tasks = self.tasks.list_by_project(project_id)
        team_members = list(dict.fromkeys(
            task.assignee_id for task in tasks if task.assignee_id
        ))

        return {
            "totalTasks": len(tasks),
            "completedTasks": sum(1 for task in tasks if task.status == "done"),
            "inProgressTasks": sum(1 for task in tasks if task.status == "in-progress"),
            "teamMembers": team_members,
        }
