# First-Come, First-Served (FCFS) Scheduling Algorithm Implementation
# schedulers/fcfs.py

from cpusim import Scheduler


class FCFSScheduler(Scheduler):
    """
    First-Come, First-Served (FCFS) Scheduling.
    - The job that arrives first is served first (ties: lowest pid).
    - Non-preemptive: once a job starts executing, it runs to completion
    """

    name = "FCFS"

    def sort_key(self, pid, table):
        process = table.process(pid)
        return (process.arrival_time, process.pid)
