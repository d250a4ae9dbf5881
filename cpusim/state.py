# state.py


class RuntimeState:
    """
    Mutable simulation state for a single process
    Attributes:
        remaining: CPU time units still needed
        admitted: True once the process entered the ready queue
        started: True once the process ran for at least one unit
        finished: True once remaining reached 0
        first_run_time: tick of the first dispatch (None until started)
    """

    def __init__(self, burst_time):
        self.remaining = burst_time
        self.admitted = False
        self.started = False
        self.finished = False
        self.first_run_time = None

    def run_unit(self, clock):
        """
        Consume one unit of CPU time
        Returns True when the process has just finished
        """
        if self.finished:
            raise RuntimeError("process already finished")
        if not self.started:
            self.started = True
            self.first_run_time = clock
        self.remaining -= 1
        if self.remaining == 0:
            self.finished = True
        return self.finished

    def __repr__(self):
        return f"RuntimeState(remaining={self.remaining}, admitted={self.admitted}, started={self.started}, finished={self.finished})"


class SimulationState:
    """
    Engine-owned simulation counters
    Attributes:
        clock: current tick
        executed_units: CPU units executed so far
        total_units: sum of burst times of every registered process
        running: pid occupying the CPU or None when idle
        quantum_counter: consecutive ticks the running process has used
    """

    def __init__(self, start_time=0):
        self.clock = start_time
        self.executed_units = 0
        self.total_units = 0
        self.running = None
        self.quantum_counter = 0

    def is_idle(self):
        return self.running is None

    def is_drained(self):
        """True when every registered burst unit has been executed"""
        return self.executed_units == self.total_units


class ProcessTable:
    """
    Registry of every known process and its RuntimeState, keyed by pid
    Methods:
        add(process): register a process, returns False for a known pid
        process(pid): the immutable Process descriptor
        state(pid): the mutable RuntimeState
        pending_arrivals(clock): not yet admitted processes that have arrived
    """

    def __init__(self):
        self._processes = {}
        self._states = {}

    def add(self, process):
        if process.pid in self._processes:
            return False
        self._processes[process.pid] = process
        self._states[process.pid] = RuntimeState(process.burst_time)
        return True

    def process(self, pid):
        return self._processes[pid]

    def state(self, pid):
        return self._states[pid]

    def remaining(self, pid):
        return self._states[pid].remaining

    def pending_arrivals(self, clock):
        """Processes with arrival_time <= clock that were never admitted, ordered by (arrival_time, pid)"""
        arrived = [
            p
            for p in self._processes.values()
            if p.arrival_time <= clock
            and not self._states[p.pid].admitted
            and not self._states[p.pid].finished
        ]
        arrived.sort(key=lambda p: (p.arrival_time, p.pid))
        return arrived

    def all_finished(self):
        return all(s.finished for s in self._states.values())

    def __contains__(self, pid):
        return pid in self._processes

    def __len__(self):
        return len(self._processes)

    def __iter__(self):
        return iter(self._processes.values())
