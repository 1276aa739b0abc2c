#!/usr/bin/env python3
"""Benchmark script for asqview performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of asqview package."""
    start = time.perf_counter()
    import asqview  # noqa: F401

    return time.perf_counter() - start


def benchmark_parse_locations() -> float:
    """Measure parsing of location lines."""
    from asqview.application.services.parser import parse_location

    start = time.perf_counter()
    for i in range(10000):
        parse_location(f"src/pkg/file_{i}.go:{i + 1}:7")
        parse_location("malformed entry")
    return time.perf_counter() - start


def benchmark_annotated_stream() -> float:
    """Measure loading of a large annotated stream."""
    from asqview.application.services.loader import load_annotated_text

    text = "".join(f"//asq_match f{i}.go:{i + 1}:1\nbody a\nbody b\n" for i in range(10000))
    start = time.perf_counter()
    load_annotated_text(text)
    return time.perf_counter() - start


def benchmark_classify_rows() -> float:
    """Measure row classification of a large file."""
    from asqview.application.services.highlighter import classify_rows
    from asqview.domain.model.location import Location

    lines = tuple(f"line {i}" for i in range(50000))
    location = Location(path="big.go", line=20000, column=1, span_line_count=40)
    start = time.perf_counter()
    for _ in range(10):
        classify_rows(lines, location)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run asqview benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    benchmarks = [
        ("Import Time", benchmark_import_time),
        ("Parse Locations (10k iterations)", benchmark_parse_locations),
        ("Annotated Stream (10k matches)", benchmark_annotated_stream),
        ("Classify Rows (50k lines x 10)", benchmark_classify_rows),
    ]
    results = [{"name": name, "unit": "seconds", "value": func()} for name, func in benchmarks]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
