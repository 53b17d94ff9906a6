"""Ordered sessions of repeating and one-shot callables."""

import threading
from collections import deque
from dataclasses import dataclass
from typing import Callable


class TaskSessionError(RuntimeError):
    """Raised when a session index does not exist."""


@dataclass(frozen=True)
class _Task:
    func: Callable[[], object]
    once: bool


class TaskRunner:
    """Runs every task of every session, in session order, on each ``run``.

    Tasks pushed with ``once=True`` are dropped after they have run.
    """

    def __init__(self):
        self._sessions = []
        self._lock = threading.RLock()

    def _session(self, which):
        if which < 0 or which >= len(self._sessions):
            raise TaskSessionError("Task session out of range.")
        return self._sessions[which]

    def push_front(self, which, func, once=False):
        """Put ``func`` at the front of session ``which``."""
        with self._lock:
            self._session(which).appendleft(_Task(func, once))

    def push_back(self, which, func, once=False):
        """Put ``func`` at the back of session ``which``."""
        with self._lock:
            self._session(which).append(_Task(func, once))

    def pop_front(self, which):
        """Drop the first task of session ``which``."""
        with self._lock:
            self._session(which).popleft()

    def pop_back(self, which):
        """Drop the last task of session ``which``."""
        with self._lock:
            self._session(which).pop()

    def new_session(self, count):
        """Append ``count`` empty sessions."""
        with self._lock:
            self._sessions.extend(deque() for _ in range(count))

    def run(self):
        """Call each task once; a raising task stays queued with those after it."""
        with self._lock:
            for session in self._sessions:
                survivors = deque()
                try:
                    while session:
                        task = session.popleft()
                        try:
                            task.func()
                        except BaseException:
                            session.appendleft(task)
                            raise
                        if not task.once:
                            survivors.append(task)
                finally:
                    session.extendleft(reversed(survivors))