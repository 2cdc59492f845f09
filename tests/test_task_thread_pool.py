import threading

import pytest

from lumen.task_thread_pool import Task, TaskPriority, TaskThreadPool


class Recording(Task):
    def __init__(self, label, log, done=None, gate=None, started=None):
        self.label = label
        self.log = log
        self.done = done
        self.gate = gate
        self.started = started

    def do_task(self):
        if self.started is not None:
            self.started.set()
        if self.gate is not None:
            self.gate.wait(5)
        self.log.append(self.label)
        if self.done is not None:
            self.done.set()


def test_task_is_abstract():
    with pytest.raises(TypeError):
        Task()


def test_task_runs():
    log = []
    done = threading.Event()
    with TaskThreadPool(2) as pool:
        pool.enqueue(Recording("only", log, done=done))
        assert done.wait(5)
    assert log == ["only"]


def test_high_priority_taken_first():
    log = []
    gate = threading.Event()
    started = threading.Event()
    done = threading.Event()
    with TaskThreadPool(1) as pool:
        pool.enqueue(Recording("block", log, gate=gate, started=started))
        assert started.wait(5)
        pool.enqueue(Recording("A", log), TaskPriority.LOW)
        pool.enqueue(Recording("B", log), TaskPriority.HIGH)
        pool.enqueue(Recording("C", log, done=done))
        gate.set()
        assert done.wait(5)
    assert log == ["block", "B", "A", "C"]


def test_failing_task_does_not_kill_worker():
    class Failing(Task):
        def do_task(self):
            raise RuntimeError("fail")

    log = []
    done = threading.Event()
    with TaskThreadPool(1) as pool:
        pool.enqueue(Failing())
        pool.enqueue(Recording("after", log, done=done))
        assert done.wait(5)
    assert log == ["after"]


def test_enqueue_rejects_non_task():
    with TaskThreadPool(1) as pool:
        with pytest.raises(TypeError):
            pool.enqueue(object())


def test_enqueue_after_shutdown_raises():
    pool = TaskThreadPool(1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.enqueue(Recording("late", []))


def test_queued_tasks_dropped_on_shutdown():
    log = []
    gate = threading.Event()
    started = threading.Event()
    pool = TaskThreadPool(1)
    pool.enqueue(Recording("block", log, gate=gate, started=started))
    assert started.wait(5)
    pool.enqueue(Recording("dropped", log))
    stopper = threading.Thread(target=pool.shutdown)
    stopper.start()
    stopper.join(0.2)
    gate.set()
    stopper.join(5)
    assert log == ["block"]


def test_negative_thread_count_rejected():
    with pytest.raises(ValueError):
        TaskThreadPool(-2)