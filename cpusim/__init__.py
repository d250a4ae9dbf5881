from .process import Process
from .state import ProcessTable, RuntimeState, SimulationState
from .ready_queue import ReadyQueue
from .scheduler import Scheduler
from .metrics import ExecutionStep, ProcessResult, compute_result, summarize
from .events import CallbackListener, EventChannel, Recorder, SimulationListener
from .engine import SimulationEngine, Timeline, simulate

__all__ = [
    "Process",
    "ProcessTable",
    "RuntimeState",
    "SimulationState",
    "ReadyQueue",
    "Scheduler",
    "ExecutionStep",
    "ProcessResult",
    "compute_result",
    "summarize",
    "CallbackListener",
    "EventChannel",
    "Recorder",
    "SimulationListener",
    "SimulationEngine",
    "Timeline",
    "simulate",
]
