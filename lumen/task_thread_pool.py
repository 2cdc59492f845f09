"""Worker threads running task objects with two priority levels."""

from __future__ import annotations

import enum
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any

from lumen.logger import LOGGER_NAME
from lumen.ring_queue import RingQueue

_log = logging.getLogger(LOGGER_NAME)


class TaskPriority(enum.Enum):
    """Queue a task is placed on; high-priority tasks are always taken first."""

    HIGH = "high"
    LOW = "low"


class Task(ABC):
    """A unit of work run by a task pool."""

    @abstractmethod
    def do_task(self) -> None:
        """Carry out the work."""


class TaskThreadPool:
    """Runs tasks on *num* worker threads, high-priority tasks first.

    Tasks still queued when the pool shuts down are dropped.
    """

    def __init__(self, num: int) -> None:
        if num < 0:
            raise ValueError("number of threads must not be negative")
        self._high: RingQueue[Task] = RingQueue()
        self._low: RingQueue[Task] = RingQueue()
        self._condition = threading.Condition()
        self._exit = False
        self._threads = [
            threading.Thread(
                target=self._worker,
                name=f"Task Graph Worker Thread {index}",
                daemon=True,
            )
            for index in range(num)
        ]
        for thread in self._threads:
            thread.start()

    def _has_work(self) -> bool:
        return len(self._high) > 0 or len(self._low) > 0

    def _worker(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._has_work() or self._exit)
                if self._exit:
                    return
                task = self._high.pop() if len(self._high) else self._low.pop()
            try:
                task.do_task()
            except Exception:
                _log.exception("task %r failed", task)

    def enqueue(self, task: Task, priority: TaskPriority = TaskPriority.LOW) -> None:
        """Queue *task* with *priority*."""
        if not callable(getattr(task, "do_task", None)):
            raise TypeError("task must provide a do_task() method")
        with self._condition:
            if self._exit:
                raise RuntimeError("cannot enqueue on a pool that has shut down")
            if priority is TaskPriority.HIGH:
                self._high.push(task)
            else:
                self._low.push(task)
            self._condition.notify()

    def shutdown(self) -> None:
        """Stop the workers, drop queued tasks and wait for running ones."""
        with self._condition:
            if self._exit:
                return
            self._exit = True
            self._high.clear()
            self._low.clear()
            self._condition.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> TaskThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()