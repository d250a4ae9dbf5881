# scheduler.py


class Scheduler:
    """
    Base class for the scheduling policies

    A policy never mutates the simulation. It only ranks the candidates the
    engine offers and reports when a running process has to be reconsidered.

    Attributes:
        name: short policy name used in logs and exports
        quantum: time slice for quantum based policies, None otherwise
    Methods:
        sort_key(pid, table): ranking key, lower runs first
        order(ready, table): candidates in policy order
        select_next(ready, table, clock): pid that should run next or None
        needs_reevaluation(state): whether the incumbent must be re-checked
    """

    name = "base"
    quantum = None

    def sort_key(self, pid, table):
        """Queue order is kept as is unless a policy overrides this"""
        return None

    def order(self, ready, table):
        """Return the candidate pids in the order this policy would serve them"""
        ready = list(ready)
        if not ready or self.sort_key(ready[0], table) is None:
            return ready
        return sorted(ready, key=lambda pid: self.sort_key(pid, table))

    def select_next(self, ready, table, clock):
        """
        Pick the next process to run
        Args:
            ready: sequence of candidate pids
            table: ProcessTable with descriptors and runtime state
            clock: current tick
        Returns: pid or None if there is no candidate
        """
        ordered = self.order(ready, table)
        if not ordered:
            return None
        return ordered[0]

    def needs_reevaluation(self, state):
        """Non-preemptive policies never reconsider a running process"""
        return False

    def __repr__(self):
        return f"{self.__class__.__name__}()"
