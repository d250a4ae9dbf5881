# workloads.py
import json

from .process import Process


MAX_BURST_TIME = 60

# Default workload: short jobs arriving in the middle of longer ones
# so every policy shows preemption or reordering.
SAMPLE_PROCESSES = [
    Process(1, "A", arrival_time=0, burst_time=2),
    Process(2, "B", arrival_time=1, burst_time=3),
    Process(3, "C", arrival_time=2, burst_time=4),
    Process(4, "D", arrival_time=3, burst_time=2),
    Process(5, "E", arrival_time=3, burst_time=6),
    Process(6, "F", arrival_time=4, burst_time=5),
    Process(7, "G", arrival_time=5, burst_time=2),
    Process(8, "H", arrival_time=6, burst_time=4),
    Process(9, "I", arrival_time=7, burst_time=3),
    Process(10, "J", arrival_time=8, burst_time=1),
    Process(11, "K", arrival_time=9, burst_time=2),
    Process(12, "L", arrival_time=10, burst_time=4),
    Process(13, "M", arrival_time=11, burst_time=2),
    Process(14, "N", arrival_time=12, burst_time=3),
    Process(15, "O", arrival_time=13, burst_time=5),
]


def sample_processes():
    """Return a copy of the sample workload"""
    return list(SAMPLE_PROCESSES)


def validate_process(process):
    """
    Check a descriptor before it is handed to the engine
    Raises ValueError describing the first problem found
    """
    if not isinstance(process.burst_time, int) or process.burst_time <= 0:
        raise ValueError(f"{process.name}: burst time must be a positive integer")
    if process.burst_time > MAX_BURST_TIME:
        raise ValueError(
            f"{process.name}: burst time must be at most {MAX_BURST_TIME}"
        )
    if not isinstance(process.arrival_time, int) or process.arrival_time < 0:
        raise ValueError(f"{process.name}: arrival time must be 0 or greater")
    if process.quantum is not None and (
        not isinstance(process.quantum, int) or process.quantum <= 0
    ):
        raise ValueError(f"{process.name}: quantum must be a positive integer")
    return process


def validate_processes(processes):
    """Validate every descriptor and reject duplicate pids"""
    seen = set()
    for process in processes:
        validate_process(process)
        if process.pid in seen:
            raise ValueError(f"duplicate pid {process.pid}")
        seen.add(process.pid)
    return processes


def load_processes_from_json(filename, limit=None):
    """
    Load process descriptors from a JSON file
    The file holds a list of objects with pid, name, arrival_time,
    burst_time and optionally quantum.
    Returns: list of validated Process sorted by (arrival_time, pid)
    """
    with open(filename) as f:
        data = json.load(f)

    try:
        processes = [Process.from_dict(p) for p in data[:limit]]
    except (KeyError, TypeError) as e:
        raise ValueError(f"{filename}: malformed process entry ({e})") from e

    validate_processes(processes)
    processes.sort(key=lambda p: (p.arrival_time, p.pid))
    return processes
