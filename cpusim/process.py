# process.py
from collections import namedtuple


_ProcessFields = namedtuple(
    "_ProcessFields", ["pid", "name", "arrival_time", "burst_time", "quantum"]
)


class Process(_ProcessFields):
    """
    Represents one process handed to the simulator (immutable)
    Attributes:
        pid: unique process ID
        name: display name, also used to sort the final results
        arrival_time: tick at which the process becomes ready (>= 0)
        burst_time: CPU time units required (> 0)
        quantum: optional per-process quantum (kept for Round Robin inputs)
    Methods:
        from_dict(data): build a Process from a JSON style dictionary
        to_dict(): plain dictionary representation
        __repr__(): string representation for debugging
        __str__(): user-friendly string representation
    """

    __slots__ = ()

    def __new__(cls, pid, name, arrival_time=0, burst_time=1, quantum=None):
        return super().__new__(cls, pid, name, arrival_time, burst_time, quantum)

    @classmethod
    def from_dict(cls, data):
        """Create a Process from a dictionary such as one loaded from JSON"""
        pid = data["pid"]
        return cls(
            pid=pid,
            name=data.get("name", f"P{pid}"),
            arrival_time=data.get("arrival_time", 0),
            burst_time=data["burst_time"],
            quantum=data.get("quantum"),
        )

    def to_dict(self):
        return self._asdict()

    def __repr__(self):
        return f"{self.name}"

    def __str__(self):
        return f"Process[pid:{self.pid}, name:{self.name}, arrival:{self.arrival_time}, burst:{self.burst_time}]"
