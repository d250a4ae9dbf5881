# export.py
import csv
import json


RESULT_FIELDS = [
    "pid",
    "name",
    "arrival_time",
    "burst_time",
    "finish_time",
    "turnaround_time",
    "waiting_time",
    "response_time",
    "service_index",
]


def step_to_dict(step):
    data = step._asdict()
    data["queue_before"] = list(step.queue_before)
    return data


def export_json(filename, algorithm, history, results):
    """Export the execution history and the results to a JSON file"""
    timeline_data = {
        "algorithm": algorithm,
        "total_time": max((r.finish_time for r in results), default=0),
        "history": [step_to_dict(step) for step in history],
        "processes": [r._asdict() for r in results],
    }
    with open(filename, "w") as f:
        json.dump(timeline_data, f, indent=2)


def export_csv(filename, results):
    """Export the per-process results to a CSV file"""
    # newline='' prevents extra blank lines on Windows
    with open(filename, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for result in results:
            row = result._asdict()
            writer.writerow({field: row[field] for field in RESULT_FIELDS})
