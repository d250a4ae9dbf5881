# ready_queue.py
from collections import deque


class ReadyQueue:
    """
    Ordered set of admitted, unfinished processes that are not on the CPU
    Attributes:
        table: shared ProcessTable used to check admission flags
    Methods:
        admit_arrivals(clock): move newly arrived processes to the tail
        remove(pid): take the process selected to run out of the queue
        requeue(pid): put a preempted process back at the tail
        snapshot(): tuple of pids in admission order
    """

    def __init__(self, table):
        self.table = table
        # deque (double ended queue) for efficient pops from left
        self._queue = deque()

    def admit_arrivals(self, clock):
        """
        Admit every process that has arrived by `clock`
        Ties on arrival time are admitted by ascending pid.
        Returns the list of admitted processes
        """
        admitted = []
        for process in self.table.pending_arrivals(clock):
            self.table.state(process.pid).admitted = True
            self._queue.append(process.pid)
            admitted.append(process)
        return admitted

    def remove(self, pid):
        self._queue.remove(pid)

    def popleft(self):
        return self._queue.popleft()

    def requeue(self, pid):
        """Append a preempted or quantum-expired process at the tail"""
        if self.table.state(pid).finished:
            raise RuntimeError(f"cannot requeue finished process {pid}")
        if pid in self._queue:
            raise RuntimeError(f"process {pid} is already queued")
        self._queue.append(pid)

    def snapshot(self):
        return tuple(self._queue)

    def __contains__(self, pid):
        return pid in self._queue

    def __iter__(self):
        return iter(self._queue)

    def __len__(self):
        return len(self._queue)

    def __bool__(self):
        return bool(self._queue)
