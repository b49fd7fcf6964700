from __future__ import annotations

import argparse
import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np

from linkcut import config as lc_config
from linkcut.algo import cut, expose, link
from linkcut.core.forest import NIL, LinkCutForest
from linkcut.errors import CycleError


@dataclass(frozen=True)
class BenchmarkResult:
    kernel: str
    nodes: int
    operations: int
    links: int
    cuts: int
    exposes: int
    rotations: int
    elapsed_seconds: float
    throughput_ops_per_sec: float


def _write_result_artifact(
    path: Path,
    *,
    runtime_snapshot: dict[str, Any],
    args: argparse.Namespace,
    result: BenchmarkResult,
) -> None:
    payload = {
        "timestamp": time.time(),
        "kernel": result.kernel,
        "nodes": result.nodes,
        "operations": result.operations,
        "links": result.links,
        "cuts": result.cuts,
        "exposes": result.exposes,
        "rotations": result.rotations,
        "elapsed_seconds": result.elapsed_seconds,
        "throughput_ops_per_sec": result.throughput_ops_per_sec,
        "parameters": {
            "seed": args.seed,
            "link_bias": args.link_bias,
        },
        "runtime": runtime_snapshot,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def benchmark_random_ops(
    *,
    nodes: int,
    operations: int,
    seed: int,
    link_bias: float,
    enable_numba: bool,
) -> BenchmarkResult:
    rng = np.random.default_rng(seed)
    forest = LinkCutForest(nodes, enable_numba=enable_numba, check_preconditions=True)
    forest.new_nodes(nodes)
    links = cuts = exposes = 0

    start = time.perf_counter()
    for _ in range(operations):
        node = int(rng.integers(nodes))
        if rng.random() >= link_bias:
            expose(forest, node)
            exposes += 1
            continue
        expose(forest, node)
        if forest.children[node, 0] != NIL:
            cut(forest, node)
            cuts += 1
            continue
        target = int(rng.integers(nodes))
        try:
            link(forest, node, target)
        except CycleError:
            exposes += 1
            continue
        links += 1
    elapsed = time.perf_counter() - start

    throughput = operations / elapsed if elapsed > 0 else float("inf")
    return BenchmarkResult(
        kernel=forest.kernel_name,
        nodes=nodes,
        operations=operations,
        links=links,
        cuts=cuts,
        exposes=exposes,
        rotations=forest.stats.rotations,
        elapsed_seconds=elapsed,
        throughput_ops_per_sec=throughput,
    )


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark random link/cut/expose throughput of the link-cut forest."
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=10_000,
        help="Number of nodes allocated up front.",
    )
    parser.add_argument(
        "--operations",
        type=int,
        default=100_000,
        help="Number of random operations to execute.",
    )
    parser.add_argument(
        "--link-bias",
        type=float,
        default=0.7,
        help="Probability that an operation attempts a link or cut rather than a plain expose.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for the operation stream.",
    )
    parser.add_argument(
        "--numba",
        action="store_true",
        help="Use the compiled kernels (a warm-up run is executed first).",
    )
    parser.add_argument(
        "--log-json",
        type=str,
        default="",
        help="Optional path to write a JSON summary for the run.",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    runtime_snapshot = lc_config.runtime_config().describe()
    if args.numba:
        benchmark_random_ops(
            nodes=16, operations=64, seed=args.seed, link_bias=args.link_bias, enable_numba=True
        )

    result = benchmark_random_ops(
        nodes=args.nodes,
        operations=args.operations,
        seed=args.seed,
        link_bias=args.link_bias,
        enable_numba=args.numba,
    )

    print(
        f"{result.kernel} | nodes={result.nodes} "
        f"ops={result.operations} "
        f"links={result.links} cuts={result.cuts} exposes={result.exposes} "
        f"rotations={result.rotations} "
        f"time={result.elapsed_seconds:.4f}s "
        f"throughput={result.throughput_ops_per_sec:,.1f} ops/s"
    )
    if args.log_json:
        log_path = Path(args.log_json)
        _write_result_artifact(
            log_path,
            runtime_snapshot=runtime_snapshot,
            args=args,
            result=result,
        )
        print(f"[link_cut_ops] wrote summary to {log_path}")


if __name__ == "__main__":
    main()
