# Round Robin Scheduling Algorithm Implementation
# schedulers/round_robin.py

from cpusim import Scheduler


DEFAULT_QUANTUM = 2


class RRScheduler(Scheduler):
    """
    Round Robin (RR) Scheduling.
    - Processes are executed in FIFO order with a fixed, policy-wide quantum
    - Preemptive: a process that uses up its quantum goes to the tail of
      the ready queue, behind the processes that arrived on that tick
    """

    name = "RR"

    def __init__(self, quantum=DEFAULT_QUANTUM):
        if not isinstance(quantum, int) or quantum <= 0:
            raise ValueError(f"quantum must be a positive integer, got {quantum!r}")
        self.quantum = quantum

    def needs_reevaluation(self, state):
        """Quantum exhausted"""
        return state.quantum_counter >= self.quantum

    def __repr__(self):
        return f"RRScheduler(quantum={self.quantum})"
