# Shortest Job First (SJF) Scheduling Algorithm Implementation
# schedulers/sjf.py

from cpusim import Scheduler


class SJFScheduler(Scheduler):
    """
    Shortest Job First (SJF) Scheduling.
    - Non-preemptive: picks the ready job with the smallest total burst
    - Ties go to the earliest arrival, then the lowest pid
    - A running job is never reconsidered, even if a shorter one arrives
    """

    name = "SJF"

    def sort_key(self, pid, table):
        process = table.process(pid)
        return (process.burst_time, process.arrival_time, process.pid)
