# metrics.py
from collections import namedtuple


# One executed tick. queue_before is the ready queue (policy order) taken
# before the tick's scheduling decision and never contains the runner.
ExecutionStep = namedtuple(
    "ExecutionStep", ["time", "pid", "name", "remaining", "queue_before"]
)

ProcessResult = namedtuple(
    "ProcessResult",
    [
        "pid",
        "name",
        "arrival_time",
        "burst_time",
        "finish_time",
        "turnaround_time",
        "waiting_time",
        "service_index",
        "response_time",
    ],
)


def service_index(burst_time, turnaround_time):
    """Burst / turnaround, 0 when the turnaround is degenerate"""
    if turnaround_time > 0:
        return burst_time / turnaround_time
    return 0


def compute_result(process, finish_time, first_run_time=None):
    """
    Build the final ProcessResult for a completed process
    Args:
        process: the completed Process
        finish_time: tick right after its last executed unit
        first_run_time: tick of its first dispatch, defaults to finish - burst
    Returns: ProcessResult
    """
    turnaround_time = finish_time - process.arrival_time
    waiting_time = turnaround_time - process.burst_time
    if first_run_time is None:
        first_run_time = finish_time - process.burst_time
    return ProcessResult(
        pid=process.pid,
        name=process.name,
        arrival_time=process.arrival_time,
        burst_time=process.burst_time,
        finish_time=finish_time,
        turnaround_time=turnaround_time,
        waiting_time=waiting_time,
        service_index=service_index(process.burst_time, turnaround_time),
        response_time=first_run_time - process.arrival_time,
    )


def sort_results(results):
    """Final result order: by process name, then pid"""
    return sorted(results, key=lambda r: (r.name, r.pid))


def summarize(results):
    """
    Aggregate statistics over a list of ProcessResult
    Returns a dict of averages plus the makespan (last finish time)
    """
    if not results:
        return {
            "count": 0,
            "avg_turnaround": 0,
            "avg_waiting": 0,
            "avg_response": 0,
            "avg_service_index": 0,
            "makespan": 0,
        }
    count = len(results)
    return {
        "count": count,
        "avg_turnaround": sum(r.turnaround_time for r in results) / count,
        "avg_waiting": sum(r.waiting_time for r in results) / count,
        "avg_response": sum(r.response_time for r in results) / count,
        "avg_service_index": sum(r.service_index for r in results) / count,
        "makespan": max(r.finish_time for r in results),
    }
