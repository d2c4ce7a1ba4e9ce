"""Tasks – TaskInfo value object."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping


@dataclasses.dataclass(frozen=True)
class TaskInfo:
    """One entry of the ``_tasks`` API.

    A task is a *parent task* when ``parent_task_id`` is unset: it is the
    root of its own task tree.
    """

    task_id: str
    action: str
    running_time_nanos: int = 0
    parent_task_id: str | None = None
    node: str | None = None
    type: str | None = None
    start_time_millis: int | None = None
    cancellable: bool = False

    @property
    def is_parent(self) -> bool:
        return self.parent_task_id is None

    @classmethod
    def from_api(cls, task_id: str, payload: Mapping[str, Any]) -> TaskInfo:
        """Build from one ``nodes.<node>.tasks.<task_id>`` object."""
        return cls(
            task_id=task_id,
            action=str(payload["action"]),
            running_time_nanos=int(payload.get("running_time_in_nanos") or 0),
            parent_task_id=payload.get("parent_task_id") or None,
            node=payload.get("node"),
            type=payload.get("type"),
            start_time_millis=payload.get("start_time_in_millis"),
            cancellable=bool(payload.get("cancellable", False)),
        )


__all__ = ["TaskInfo"]
