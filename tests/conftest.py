import pytest

from cpusim import Process


@pytest.fixture
def srtf_workload():
    return [
        Process(1, "A", arrival_time=0, burst_time=4),
        Process(2, "B", arrival_time=2, burst_time=2),
        Process(3, "C", arrival_time=3, burst_time=3),
    ]


@pytest.fixture
def same_arrival_workload():
    return [
        Process(1, "A", arrival_time=0, burst_time=5),
        Process(2, "B", arrival_time=0, burst_time=3),
        Process(3, "C", arrival_time=0, burst_time=4),
    ]
