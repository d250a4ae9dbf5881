from .fcfs import FCFSScheduler
from .sjf import SJFScheduler
from .srtf import SRTFScheduler
from .round_robin import DEFAULT_QUANTUM, RRScheduler

# Map scheduler name to class (matched case-insensitively)
SCHEDULERS = {
    "fcfs": FCFSScheduler,
    "fcfsscheduler": FCFSScheduler,
    "sjf": SJFScheduler,
    "sjfscheduler": SJFScheduler,
    "srtf": SRTFScheduler,
    "srtfscheduler": SRTFScheduler,
    "rr": RRScheduler,
    "rrscheduler": RRScheduler,
    "roundrobin": RRScheduler,
}


def get_scheduler(name, quantum=DEFAULT_QUANTUM):
    """
    Build a scheduler from its name
    Raises ValueError for an unknown name
    """
    try:
        scheduler_class = SCHEDULERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"unknown scheduler '{name}', must be one of: fcfs, sjf, srtf, rr"
        ) from None
    if scheduler_class is RRScheduler:
        return RRScheduler(quantum=quantum)
    return scheduler_class()


__all__ = [
    "FCFSScheduler",
    "SJFScheduler",
    "SRTFScheduler",
    "RRScheduler",
    "DEFAULT_QUANTUM",
    "SCHEDULERS",
    "get_scheduler",
]
