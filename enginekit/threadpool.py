"""A pool of worker threads that run queued callables."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

__all__ = ["ThreadPool"]

Job = Callable[[], object]

_log = logging.getLogger(__name__)


class ThreadPool:
    """Runs jobs on worker threads; the most recently pushed job is taken first.

    Joining stops the workers as soon as they finish their current job; jobs
    still queued at that point are not run.
    """

    def __init__(self) -> None:
        self._queue: list[Job] = []
        self._condition = threading.Condition()
        self._threads: list[threading.Thread] = []
        self._stopping = False
        self._unfinished = 0

    def push_job(self, job: Job) -> None:
        """Queue a job and wake one worker."""
        with self._condition:
            self._unfinished += 1
            self._queue.append(job)
            self._condition.notify()

    def run(self, thread_count: int) -> None:
        """Start thread_count workers; raises RuntimeError if already running."""
        if self._threads:
            raise RuntimeError("thread pool is already running")
        self._stopping = False
        for _ in range(thread_count):
            thread = threading.Thread(target=self._worker, daemon=True)
            self._threads.append(thread)
            thread.start()

    def join(self) -> None:
        """Stop all workers and wait for them to exit."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        for thread in self._threads:
            thread.join()
        self._threads.clear()

    def queue_size(self) -> int:
        """Number of jobs waiting to be picked up."""
        with self._condition:
            return len(self._queue)

    def unfinished_jobs(self) -> int:
        """Number of pushed jobs that have not yet completed."""
        with self._condition:
            return self._unfinished

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.join()

    def _take_job(self) -> Optional[Job]:
        with self._condition:
            return self._queue.pop() if self._queue else None

    def _worker(self) -> None:
        while True:
            if self._stopping:
                return
            job = self._take_job()
            if job is not None:
                try:
                    job()
                except Exception:
                    _log.exception("job raised an exception")
                finally:
                    with self._condition:
                        self._unfinished -= 1
            with self._condition:
                self._condition.wait_for(lambda: self._stopping or bool(self._queue))