"""A fixed pool of worker threads running independent callables."""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from lumen.ring_queue import RingQueue


class ThreadPool:
    """Runs submitted callables on *num* worker threads, first in first out.

    Work still queued when the pool shuts down is not run; its futures are
    cancelled.
    """

    def __init__(self, num: int) -> None:
        if num < 0:
            raise ValueError("number of threads must not be negative")
        self._tasks: RingQueue[tuple[Future, Callable[[], Any]]] = RingQueue()
        self._condition = threading.Condition()
        self._exit = False
        self._threads = [
            threading.Thread(
                target=self._worker,
                name=f"Thread Pool Worker Thread {index}",
                daemon=True,
            )
            for index in range(num)
        ]
        for thread in self._threads:
            thread.start()

    def _worker(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: len(self._tasks) > 0 or self._exit)
                if self._exit:
                    return
                future, call = self._tasks.pop()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = call()
            except Exception as exc:  # handed to whoever waits on the future
                future.set_exception(exc)
            else:
                future.set_result(result)

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._condition:
            if self._exit:
                raise RuntimeError("cannot submit to a pool that has shut down")
            self._tasks.push((future, lambda: fn(*args, **kwargs)))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop the workers, cancel queued work and wait for running work."""
        with self._condition:
            if self._exit:
                return
            self._exit = True
            pending = list(self._tasks)
            self._tasks.clear()
            self._condition.notify_all()
        for future, _ in pending:
            future.cancel()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()