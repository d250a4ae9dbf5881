# engine.py
from collections import namedtuple

from .events import EventChannel, Recorder, TickEvents
from .metrics import ExecutionStep, compute_result, sort_results
from .ready_queue import ReadyQueue
from .state import ProcessTable, SimulationState


Timeline = namedtuple("Timeline", ["history", "results"])


class SimulationEngine:
    """
    Discrete-time, single CPU scheduling simulator

    One engine drives any policy: the Scheduler instance only ranks
    candidates, everything else (admission, preemption, execution,
    metrics and event delivery) happens here.

    Attributes:
        scheduler: policy object (see cpusim.scheduler.Scheduler)
        table: ProcessTable with every registered process
        ready_queue: ReadyQueue of admitted processes not on the CPU
        state: SimulationState (clock, executed/total units, running pid)
        channel: EventChannel delivering Step/Finish/Complete events
        results: ProcessResult list, sorted by name once complete
        log: human-readable log of events
        verbose: if True, print log entries to console
    Methods:
        register_process(process): add a process, duplicates are ignored
        tick(): advance the simulation by one time unit
        current_time(): the current clock value
        run(): tick until every registered process has finished
        run_to_completion(processes): register, run and return the Timeline
        snapshot(): current state as a dictionary
        timeline(): the human-readable log as a string
    """

    def __init__(self, scheduler, start_time=0, verbose=False):
        self.scheduler = scheduler
        self.table = ProcessTable()
        self.ready_queue = ReadyQueue(self.table)
        self.state = SimulationState(start_time)
        self.channel = EventChannel()
        self.results = []
        self.log = []
        self.verbose = verbose
        self._complete = False

    def register_process(self, process):
        """
        Register a process with the engine
        Args:
            process: Process descriptor, assumed valid
        Returns: True if added, False if the pid was already known
        """
        if not self.table.add(process):
            return False
        self.state.total_units += process.burst_time
        self._complete = False
        self._record(
            f"{process.name} registered (arrival={process.arrival_time}, burst={process.burst_time})"
        )
        return True

    def subscribe(self, listener):
        return self.channel.subscribe(listener)

    def unsubscribe(self, listener):
        self.channel.unsubscribe(listener)

    def current_time(self):
        return self.state.clock

    def stats(self):
        return {
            "executed": self.state.executed_units,
            "total": self.state.total_units,
        }

    def has_jobs(self):
        """Check if there is still burst time left to execute"""
        return not self.state.is_drained()

    def is_complete(self):
        return self._complete

    def tick(self):
        """
        Advance the simulation by exactly one time unit

        Events are handed to the listeners once the tick is over, so a
        listener calling current_time() sees the clock of the next tick.

        Returns: True if every registered process has finished
        """
        if self._complete:
            return True

        state = self.state
        clock = state.clock

        for process in self.ready_queue.admit_arrivals(clock):
            self._record(f"{process.name} arrived → ready queue")

        # queue view before this tick's scheduling decision
        queue_before = tuple(self.scheduler.order(self.ready_queue, self.table))

        if state.running is not None and self.scheduler.needs_reevaluation(state):
            self._reevaluate(queue_before)

        if state.running is None:
            self._dispatch()

        step = None
        finish = None
        complete = None

        if state.running is not None:
            pid = state.running
            process = self.table.process(pid)
            runtime = self.table.state(pid)

            done = runtime.run_unit(clock)
            state.executed_units += 1
            state.quantum_counter += 1

            step = ExecutionStep(
                time=clock,
                pid=pid,
                name=process.name,
                remaining=runtime.remaining,
                queue_before=queue_before,
            )

            if done:
                finish = compute_result(process, clock + 1, runtime.first_run_time)
                self.results.append(finish)
                state.running = None
                state.quantum_counter = 0
                self._record(
                    f"{process.name} finished (turnaround={finish.turnaround_time}, waiting={finish.waiting_time})"
                )
        else:
            self._record("CPU idle")

        state.clock += 1

        if state.is_drained():
            self.results = sort_results(self.results)
            complete = tuple(self.results)
            self._complete = True
            self._record(f"simulation complete ({len(self.results)} processes)")

        self.channel.deliver(TickEvents(step, finish, complete))
        return self._complete

    def _reevaluate(self, queue_before):
        """Offer the running process and the ready queue to the policy again"""
        state = self.state
        incumbent = state.running
        candidates = list(queue_before) + [incumbent]
        winner = self.scheduler.select_next(candidates, self.table, state.clock)
        assert winner in candidates, f"{self.scheduler.name} selected unknown pid {winner}"

        if winner != incumbent:
            self.ready_queue.requeue(incumbent)
            self.ready_queue.remove(winner)
            state.running = winner
            old = self.table.process(incumbent).name
            new = self.table.process(winner).name
            if self.scheduler.quantum is not None:
                self._record(f"{old} quantum expired → ready queue, {new} dispatched")
            else:
                self._record(f"{old} preempted by {new}")
        state.quantum_counter = 0

    def _dispatch(self):
        """Give the idle CPU to the policy's choice, if any process is ready"""
        ready = list(self.ready_queue)
        pid = self.scheduler.select_next(ready, self.table, self.state.clock)
        if pid is None:
            return
        assert pid in ready, f"{self.scheduler.name} selected unknown pid {pid}"
        self.ready_queue.remove(pid)
        self.state.running = pid
        self.state.quantum_counter = 0
        process = self.table.process(pid)
        self._record(
            f"{process.name} dispatched to CPU (remaining: {self.table.remaining(pid)})"
        )

    def run(self):
        """
        Run the simulation until all registered processes are finished
        Returns: list of ProcessResult sorted by name
        """
        while not self.tick():
            pass
        return list(self.results)

    def run_to_completion(self, processes):
        """
        Register `processes` and run the simulation without external pacing
        Returns: Timeline(history, results)
        """
        recorder = self.subscribe(Recorder())
        try:
            for process in processes:
                self.register_process(process)
            self.run()
        finally:
            self.unsubscribe(recorder)
        # nothing new to run: the engine was already complete
        if recorder.results is None:
            return Timeline(recorder.history, list(self.results))
        return Timeline(recorder.history, recorder.results)

    def snapshot(self):
        """Return the current state for display"""
        return {
            "clock": self.state.clock,
            "running": self.state.running,
            "ready": list(self.ready_queue),
            "finished": [r.pid for r in self.results],
            "executed": self.state.executed_units,
            "total": self.state.total_units,
        }

    def timeline(self):
        """Return the human-readable log as a single string"""
        return "\n".join(self.log)

    def _record(self, event):
        entry = f"time={self.state.clock:<3} | {event}"
        self.log.append(entry)

        # Print to console if verbose
        if self.verbose:
            print(entry)


def simulate(scheduler, processes, start_time=0, verbose=False):
    """Batch run of `processes` under `scheduler` on a fresh engine"""
    engine = SimulationEngine(scheduler, start_time=start_time, verbose=verbose)
    return engine.run_to_completion(processes)
