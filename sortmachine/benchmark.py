"""
SortingMachine benchmark command-line tool.

Times the three phases of a sorting machine over exponentially growing
random inputs and writes the results to a CSV file:
- add: buffering every item in insertion mode
- build: change_to_extraction_mode (heap construction)
- drain: remove_first until empty

Usage examples:
    python -m sortmachine.benchmark
    python -m sortmachine.benchmark --base-input 1000 --steps 8 --output results.csv
"""

import argparse
import csv
import logging
import random
import statistics
import sys
import time

from .sorting_machine import SortingMachine

logger = logging.getLogger(__name__)

# Defaults, all overridable from the command line
DEFAULT_OUTPUT_CSV = "sorting_machine_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_STEPS = 12
DEFAULT_ITERATIONS = 5


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def filled_machine(data):
    """Return an insertion-mode machine holding every item of `data`."""
    m = SortingMachine()
    for item in data:
        m.add(item)
    return m


# ----------------------------
# Operations to Benchmark
# ----------------------------
# Each operation does its setup on the random data and returns the callable to time.

def op_add(data):
    def run():
        filled_machine(data)
    return run


def op_build(data):
    m = filled_machine(data)
    return m.change_to_extraction_mode


def op_drain(data):
    m = filled_machine(data)
    m.change_to_extraction_mode()

    def run():
        while m.size() > 0:
            m.remove_first()
    return run


OPERATIONS = {
    "add": op_add,
    "build": op_build,
    "drain": op_drain,
}


def measure_operation_time(operation, input_size: int, iterations: int = DEFAULT_ITERATIONS):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        run = operation(generate_random_list(input_size))
        start = time.perf_counter()
        run()
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT,
                   steps: int = DEFAULT_STEPS, iterations: int = DEFAULT_ITERATIONS):
    """Run exponential performance tests for SortingMachine phases."""
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    logger.debug("benchmarking sizes %s", input_sizes)

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
        ])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                print(f"{op_name:<6} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms")

    print(f"\nBenchmark completed. Results saved to {output_file}")


# -------------------------------------------------------------------
# Parser & entry point
# -------------------------------------------------------------------

def build_parser():
    p = argparse.ArgumentParser(prog="sortmachine.benchmark", description="Benchmark SortingMachine")
    p.add_argument("--output", default=DEFAULT_OUTPUT_CSV, help="CSV file to write")
    p.add_argument("--base-input", type=int, default=DEFAULT_BASE_INPUT)
    p.add_argument("--steps", type=int, default=DEFAULT_STEPS,
                   help="Number of doublings of the base input size")
    p.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv=None):
    """Entry point when invoked via `python -m sortmachine.benchmark`."""
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if args.iterations < 1:
        raise SystemExit("--iterations must be >= 1")
    run_benchmarks(args.output, args.base_input, args.steps, args.iterations)


if __name__ == "__main__":
    main()
