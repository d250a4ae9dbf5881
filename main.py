# main.py
import sys

from rich.console import Console
from rich.table import Table

from cpusim import CallbackListener, Recorder, SimulationEngine, summarize
from cpusim.export import export_csv, export_json
from cpusim.workloads import load_processes_from_json, sample_processes
from schedulers import DEFAULT_QUANTUM, get_scheduler


def parse_args(argv):
    """Parse key=value command line arguments into a dict"""
    args = {}
    for arg in argv:
        if "=" in arg:
            k, v = arg.split("=", 1)
            args[k.strip().lower()] = v.strip()
    return args


def run_batch(scheduler, processes, start_time=0, verbose=False):
    """Run everything at once"""
    engine = SimulationEngine(scheduler, start_time=start_time, verbose=verbose)
    history, results = engine.run_to_completion(processes)
    return engine, history, results


def run_incremental(scheduler, processes, start_time=0, verbose=False, console=None):
    """Drive the engine one tick at a time, printing each executed step"""
    engine = SimulationEngine(scheduler, start_time=start_time, verbose=verbose)
    recorder = engine.subscribe(Recorder())

    if console is not None:
        engine.subscribe(
            CallbackListener(
                on_step=lambda s: console.print(
                    f"t={s.time:<3} {s.name:<6} remaining={s.remaining:<3} queue={list(s.queue_before)}"
                ),
                on_finish=lambda r: console.print(
                    f"[green]{r.name} finished at t={r.finish_time}[/green]"
                ),
            )
        )

    for p in processes:
        engine.register_process(p)

    while not engine.tick():
        pass
    return engine, recorder.history, recorder.results


def print_stats(results, algorithm, console=None):
    """Print statistics for all finished processes"""
    console = console or Console()
    if not results:
        console.print("\nNo processes have completed.")
        return

    table = Table(title=f"{algorithm} Process Details")
    for col in ["PID", "Name", "Arrival", "Burst", "Finish", "Turnaround", "Waiting", "Response", "Service Index"]:
        table.add_column(col, justify="center")

    for r in results:
        table.add_row(
            str(r.pid),
            r.name,
            str(r.arrival_time),
            str(r.burst_time),
            str(r.finish_time),
            str(r.turnaround_time),
            str(r.waiting_time),
            str(r.response_time),
            f"{r.service_index:.3f}",
        )
    console.print(table)

    summary = summarize(results)
    console.print("\n" + "-" * 60)
    console.print("SUMMARY STATISTICS")
    console.print("-" * 60)
    console.print(f"Total Processes Completed:  {summary['count']}")
    console.print(f"Total Simulation Time:      {summary['makespan']}")
    console.print(f"\nAverage Turnaround Time:    {summary['avg_turnaround']:.2f}")
    console.print(f"Average Waiting Time:       {summary['avg_waiting']:.2f}")
    console.print(f"Average Response Time:      {summary['avg_response']:.2f}")
    console.print(f"Average Service Index:      {summary['avg_service_index']:.3f}")


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    console = Console()

    try:
        quantum = int(args.get("quantum", DEFAULT_QUANTUM))
        start_time = int(args.get("start", 0))
        limit = int(args["limit"]) if "limit" in args else None
        scheduler = get_scheduler(args.get("scheduler", "fcfs"), quantum=quantum)
        if "file" in args:
            processes = load_processes_from_json(args["file"], limit=limit)
        else:
            processes = sample_processes()[:limit]
    except (OSError, ValueError) as e:
        console.print(f"Error: {e}")
        return 1

    mode = args.get("mode", "batch")
    if mode not in ("batch", "tick"):
        console.print(f"Error: Invalid mode '{mode}'. Must be one of: batch, tick")
        return 1
    verbose = args.get("verbose", "0") not in ("0", "false", "no", "")

    console.print(f"Running simulation with {scheduler!r}")
    console.print(f"Processes loaded: {len(processes)}")

    if mode == "tick":
        engine, history, results = run_incremental(
            scheduler, processes, start_time=start_time, verbose=verbose, console=console
        )
    else:
        engine, history, results = run_batch(
            scheduler, processes, start_time=start_time, verbose=verbose
        )

    print_stats(results, scheduler.name, console=console)
    stats = engine.stats()
    console.print(f"CPU Units Executed:         {stats['executed']}/{stats['total']}")

    if "json" in args:
        export_json(args["json"], scheduler.name, history, results)
        console.print(f"Timeline exported to {args['json']}")
    if "csv" in args:
        export_csv(args["csv"], results)
        console.print(f"Results exported to {args['csv']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
