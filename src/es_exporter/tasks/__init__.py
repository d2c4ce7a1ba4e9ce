"""Tasks – task snapshot model and per-action duration tracking."""
from es_exporter.tasks.task import TaskInfo
from es_exporter.tasks.tracker import TASKS_DURATION_METRIC, TaskDurationTracker

__all__ = ["TASKS_DURATION_METRIC", "TaskDurationTracker", "TaskInfo"]
