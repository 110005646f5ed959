import argparse
from concurrent.futures import ProcessPoolExecutor
from time import perf_counter

import wandb
import yaml

from equal_parts.data.partition import split_into
from equal_parts.util.bench import run_benchmarks
from equal_parts.util.helper import print0

DEFAULT_CONFIG_PATH = "run-configs/default-config.yaml"


def main():
    # 1. Parse arguments
    run_config = parse_configs()

    # 2. Setup logging
    run = setup_logging(run_config)

    # 3. Run
    if run_config["mode"] == "jobs":
        run_jobs(run_config)
    else:
        run_bench(run_config)

    # 4. Free resources
    free_resources(run)


def parse_configs(argv=None) -> dict:
    parser = argparse.ArgumentParser()
    parser.add_argument("mode", nargs="?", choices=["jobs", "bench"], default="jobs")
    parser.add_argument("--config_path", type=str, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--num-jobs", type=int, default=None)
    parser.add_argument("--concurrent-jobs", type=int, default=None)
    parser.add_argument("--wandb", action="store_true", default=False)

    args = parser.parse_args(argv)

    with open(args.config_path, "r") as f:
        run_config = yaml.safe_load(f) or {}

    # Command line flags take precedence over the config file.
    if args.num_jobs is not None:
        run_config["num-jobs"] = args.num_jobs
    if args.concurrent_jobs is not None:
        run_config["concurrent-jobs"] = args.concurrent_jobs
    if args.wandb:
        run_config["wandb"] = True
    run_config["mode"] = args.mode

    return run_config


def setup_logging(run_config):
    if not run_config["wandb"]:
        return None
    return wandb.init(
        project="equal-parts",
        name=f"{run_config['mode']}-{run_config['concurrent-jobs']}",
        config=run_config,
    )


def slow_compute(value: int) -> int:
    """Slowly calculates the integer square root of value."""
    left = 1
    right = value - 1
    while left < right:
        mid = (left + right) // 2
        if mid * mid == value:
            return mid
        elif mid * mid < value:
            left = mid + 1
        else:
            right = mid - 1
    return left


def compute_part(part: list[int]) -> list[int]:
    return [slow_compute(value) for value in part]


def run_serial(inputs: list[int]) -> tuple[list[int], float]:
    start = perf_counter()
    results = compute_part(inputs)
    return results, perf_counter() - start


def run_parallel(inputs: list[int], concurrent_jobs: int) -> tuple[list[int], float]:
    """Process inputs split into concurrent_jobs equal parts, one per worker."""
    parts = [list(part) for part in split_into(inputs, concurrent_jobs)]

    start = perf_counter()
    results = []
    with ProcessPoolExecutor(max_workers=concurrent_jobs) as executor:
        # map keeps part order, so results line up with inputs.
        for partial in executor.map(compute_part, parts):
            results.extend(partial)
    return results, perf_counter() - start


def run_jobs(run_config: dict):
    inputs = list(range(1, run_config["num-jobs"] + 1))
    concurrent_jobs = run_config["concurrent-jobs"]

    serial_results, serial_time = run_serial(inputs)
    print0(f"Serial:   completed {len(serial_results)} tasks in {serial_time:.3f}s")

    parallel_results, parallel_time = run_parallel(inputs, concurrent_jobs)
    print0(
        f"Parallel: completed {len(parallel_results)} tasks in {parallel_time:.3f}s"
    )

    if run_config["wandb"]:
        wandb.log(
            {
                "serial-seconds": serial_time,
                "parallel-seconds": parallel_time,
                "tasks": len(inputs),
            }
        )
    return serial_results, parallel_results


def run_bench(run_config: dict):
    results = run_benchmarks(
        run_config["bench-sizes"],
        run_config["bench-parts"],
        run_config["bench-repeats"],
    )
    print0(results.to_string(index=False))
    if run_config["wandb"]:
        wandb.log({"benchmarks": wandb.Table(dataframe=results)})
    return results


def free_resources(run):
    if run is not None:
        wandb.finish()


if __name__ == "__main__":
    main()
