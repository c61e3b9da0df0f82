"""Task list endpoints."""

from fastapi import APIRouter, HTTPException

from ...models import TaskCreate
from ...store import TASK_STORE

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def list_tasks():
    return {"success": True, "tasks": TASK_STORE.list()}


@router.post("", status_code=201)
async def create_task(payload: TaskCreate):
    title = (payload.title or "").strip()
    if not title:
        raise HTTPException(status_code=400, detail="Title is required")
    task = TASK_STORE.create(title)
    return {"success": True, "task": task}


@router.patch("/{task_id}")
async def toggle_task(task_id: int):
    """Flip the completion state of a task."""
    task = TASK_STORE.toggle(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"success": True, "task": task}


@router.delete("/{task_id}")
async def delete_task(task_id: int):
    if not TASK_STORE.delete(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return {"success": True, "message": "Task deleted"}
