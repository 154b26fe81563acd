#!/usr/bin/env python3
"""Benchmark permission checks: latency (p50, p95, p99) and QPS.

Usage:
  export API_URL=http://localhost:8000 BENCH_MEMBER_ID=<uuid>
  uv run python scripts/bench_check.py --space-id <uuid> [--meeting-id <uuid>] [--num-checks 500]

The member, space and meeting must already exist in the database.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def run_checks(
    client: httpx.Client,
    url: str,
    headers: dict[str, str],
    num_checks: int,
) -> tuple[list[float], int]:
    latencies: list[float] = []
    errors = 0
    for _ in range(num_checks):
        t0 = time.perf_counter()
        r = client.get(url, headers=headers)
        elapsed = time.perf_counter() - t0
        if r.status_code == 200:
            latencies.append(elapsed)
        else:
            errors += 1
    return latencies, errors


def summarize(label: str, latencies: list[float], errors: int, total_elapsed: float) -> str:
    n = len(latencies)
    if n == 0:
        return f"{label}: no successful checks (errors={errors})\n"
    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return (
        f"{label} (checks={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission checks")
    parser.add_argument("--space-id", required=True, help="Space to check")
    parser.add_argument("--meeting-id", default=None, help="Meeting to check (optional)")
    parser.add_argument("--action", default="read", help="Action to check")
    parser.add_argument("--num-checks", type=int, default=200, help="Requests per resource")
    parser.add_argument("--output", type=str, default="/results/bench_check.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    member_id = os.environ.get("BENCH_MEMBER_ID")
    if not member_id:
        print("BENCH_MEMBER_ID is required")
        return 1
    header_name = os.environ.get("MEMBER_ID_HEADER", "X-Member-Id")
    headers = {header_name: member_id}

    targets = [("Space check", f"{api_url}/v1/spaces/{args.space_id}/permissions/{args.action}")]
    if args.meeting_id:
        targets.append(
            ("Meeting check", f"{api_url}/v1/meetings/{args.meeting_id}/permissions/{args.action}")
        )

    summary = ""
    with httpx.Client(timeout=30.0) as client:
        for label, url in targets:
            print(f"Running {args.num_checks} requests: {label}...")
            start_total = time.perf_counter()
            latencies, errors = run_checks(client, url, headers, args.num_checks)
            summary += summarize(label, latencies, errors, time.perf_counter() - start_total)
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
