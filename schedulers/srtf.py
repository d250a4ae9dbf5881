# Shortest Remaining Time First (SRTF) Scheduling Algorithm Implementation
# schedulers/srtf.py

from cpusim import Scheduler


class SRTFScheduler(Scheduler):
    """
    Shortest Remaining Time First (SRTF) Scheduling.
    - Preemptive version of SJF
    - At each time step, selects the process with the shortest remaining time,
      the running process included
    - Ties go to the LATEST arrival, then the HIGHEST pid, so a newcomer
      with the same remaining time takes the CPU from the incumbent
    """

    name = "SRTF"

    def sort_key(self, pid, table):
        process = table.process(pid)
        return (table.remaining(pid), -process.arrival_time, -process.pid)

    def needs_reevaluation(self, state):
        return True
