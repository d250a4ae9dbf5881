import pytest

from cpusim import Process, simulate
from schedulers import (
    FCFSScheduler,
    RRScheduler,
    SJFScheduler,
    SRTFScheduler,
    get_scheduler,
)


def pids_by_time(history):
    return [(s.time, s.pid) for s in history]


def by_name(results):
    return {r.name: r for r in results}


def test_fcfs_runs_in_arrival_order():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=3),
        Process(2, "B", arrival_time=1, burst_time=2),
    ]
    history, results = simulate(FCFSScheduler(), procs)

    assert [s.pid for s in history] == [1, 1, 1, 2, 2]
    assert [s.remaining for s in history] == [2, 1, 0, 1, 0]
    res = by_name(results)
    assert (res["A"].finish_time, res["A"].turnaround_time, res["A"].waiting_time) == (3, 3, 0)
    assert (res["B"].finish_time, res["B"].turnaround_time, res["B"].waiting_time) == (5, 4, 2)


def test_fcfs_queue_snapshot_excludes_runner():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=3),
        Process(2, "B", arrival_time=1, burst_time=2),
    ]
    history, _ = simulate(FCFSScheduler(), procs)
    assert history[0].queue_before == (1,)
    assert history[1].queue_before == (2,)
    assert history[3].queue_before == (2,)
    assert history[4].queue_before == ()


def test_fcfs_same_arrival_breaks_ties_by_pid():
    procs = [
        Process(3, "C", arrival_time=0, burst_time=1),
        Process(1, "A", arrival_time=0, burst_time=1),
        Process(2, "B", arrival_time=0, burst_time=1),
    ]
    history, _ = simulate(FCFSScheduler(), procs)
    assert [s.pid for s in history] == [1, 2, 3]


def test_idle_cpu_emits_no_step():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=1),
        Process(2, "B", arrival_time=3, burst_time=2),
    ]
    history, results = simulate(FCFSScheduler(), procs)
    assert [s.time for s in history] == [0, 3, 4]
    assert by_name(results)["B"].finish_time == 5
    assert by_name(results)["B"].waiting_time == 0


def test_sjf_does_not_preempt_running_job():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=5),
        Process(2, "B", arrival_time=1, burst_time=1),
        Process(3, "C", arrival_time=2, burst_time=2),
    ]
    history, results = simulate(SJFScheduler(), procs)

    assert [s.pid for s in history] == [1, 1, 1, 1, 1, 2, 3, 3]
    res = by_name(results)
    assert res["A"].finish_time == 5
    assert res["B"].finish_time == 6
    assert res["C"].finish_time == 8


def test_sjf_tie_goes_to_earlier_arrival_then_lower_pid():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=3),
        Process(2, "B", arrival_time=2, burst_time=2),
        Process(3, "C", arrival_time=1, burst_time=2),
        Process(4, "D", arrival_time=1, burst_time=2),
    ]
    history, _ = simulate(SJFScheduler(), procs)
    assert [s.pid for s in history] == [1, 1, 1, 3, 3, 4, 4, 2, 2]


def test_srtf_scenario(srtf_workload):
    history, results = simulate(SRTFScheduler(), srtf_workload)

    assert [s.pid for s in history] == [1, 1, 2, 2, 1, 1, 3, 3, 3]
    res = by_name(results)

    assert res["B"].finish_time == 4
    assert res["B"].turnaround_time == 2
    assert res["B"].waiting_time == 0
    assert res["B"].service_index == 1.0

    assert res["A"].finish_time == 6
    assert res["A"].turnaround_time == 6
    assert res["A"].waiting_time == 2
    assert res["A"].service_index == pytest.approx(0.667, abs=1e-3)

    assert res["C"].finish_time == 9
    assert res["C"].turnaround_time == 6
    assert res["C"].waiting_time == 3
    assert res["C"].service_index == 0.5


def test_srtf_queue_is_ordered_by_remaining_time(srtf_workload):
    history, _ = simulate(SRTFScheduler(), srtf_workload)
    # t=3: preempted A (remaining 2) ranks ahead of newly arrived C (3)
    assert history[3].queue_before == (1, 3)
    assert history[2].queue_before == (2,)


def test_srtf_preempts_on_arrival_of_shorter_job():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=5),
        Process(2, "B", arrival_time=1, burst_time=2),
    ]
    history, results = simulate(SRTFScheduler(), procs)
    assert [s.pid for s in history] == [1, 2, 2, 1, 1, 1, 1]
    assert by_name(results)["B"].finish_time == 3
    assert by_name(results)["A"].finish_time == 7


def test_srtf_tie_between_waiting_jobs_favors_later_arrival():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=2),
        Process(2, "B", arrival_time=0, burst_time=3),
        Process(3, "C", arrival_time=1, burst_time=3),
    ]
    history, _ = simulate(SRTFScheduler(), procs)
    assert [s.pid for s in history] == [1, 1, 3, 3, 3, 2, 2, 2]


def test_round_robin_scenario():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=5),
        Process(2, "B", arrival_time=1, burst_time=2),
    ]
    history, results = simulate(RRScheduler(quantum=2), procs)

    assert pids_by_time(history) == [
        (0, 1), (1, 1), (2, 2), (3, 2), (4, 1), (5, 1), (6, 1),
    ]
    assert [s.remaining for s in history if s.pid == 1] == [4, 3, 2, 1, 0]
    assert by_name(results)["B"].finish_time == 4
    assert by_name(results)["A"].finish_time == 7
    assert history[2].queue_before == (2,)
    assert history[4].queue_before == (1,)
    assert history[6].queue_before == ()


def test_round_robin_arrivals_queue_ahead_of_expired_process():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=3),
        Process(2, "B", arrival_time=0, burst_time=3),
        Process(3, "C", arrival_time=2, burst_time=1),
    ]
    history, _ = simulate(RRScheduler(quantum=2), procs)
    # at t=2 A expires: C (arrived t=2) must be served before A again
    assert [s.pid for s in history] == [1, 1, 2, 2, 3, 1, 2]


def test_round_robin_bounded_slices(same_arrival_workload):
    quantum = 2
    history, _ = simulate(RRScheduler(quantum=quantum), same_arrival_workload)

    run_length = 0
    previous = None
    for step in history:
        run_length = run_length + 1 if step.pid == previous else 1
        previous = step.pid
        assert run_length <= quantum


def test_round_robin_is_starvation_free(same_arrival_workload):
    quantum = 2
    n = len(same_arrival_workload)
    history, _ = simulate(RRScheduler(quantum=quantum), same_arrival_workload)

    for proc in same_arrival_workload:
        ready_since = proc.arrival_time
        for step in history:
            if step.pid != proc.pid:
                continue
            assert step.time - ready_since <= quantum * n
            ready_since = step.time + 1


def test_get_scheduler_by_name():
    assert isinstance(get_scheduler("FCFS"), FCFSScheduler)
    assert isinstance(get_scheduler("sjf"), SJFScheduler)
    assert isinstance(get_scheduler("SRTFScheduler"), SRTFScheduler)
    rr = get_scheduler("roundrobin", quantum=3)
    assert isinstance(rr, RRScheduler)
    assert rr.quantum == 3


def test_get_scheduler_rejects_unknown_name():
    with pytest.raises(ValueError):
        get_scheduler("lottery")


@pytest.mark.parametrize("quantum", [0, -1, 1.5])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        RRScheduler(quantum=quantum)
