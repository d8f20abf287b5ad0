#!/usr/bin/env python3
"""
jirafields Benchmark

Measures field suggestion latency and dynamic field cache behaviour under
concurrent readers.

Usage:
    python scripts/benchmark_suggestions.py
    python scripts/benchmark_suggestions.py --iterations 5000 --readers 200
    python scripts/benchmark_suggestions.py --suggestions-only --output /tmp/results.json
"""

import argparse
import asyncio
import json
import random
import string
import sys
import time
from datetime import datetime
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jirafields import DynamicFieldCache, EntityType, RemoteFieldSource, StaticSuggestionEngine
from jirafields.catalog import get_static_fields


# =============================================================================
# Input Generation
# =============================================================================

def misspell(name: str) -> str:
    """Apply one random edit (drop, swap, replace or insert) to a name."""
    if len(name) < 2:
        return name + random.choice(string.ascii_lowercase)
    i = random.randrange(len(name) - 1)
    edit = random.choice(["drop", "swap", "replace", "insert"])
    if edit == "drop":
        return name[:i] + name[i + 1:]
    if edit == "swap":
        return name[:i] + name[i + 1] + name[i] + name[i + 2:]
    if edit == "replace":
        return name[:i] + random.choice(string.ascii_lowercase) + name[i + 1:]
    return name[:i] + random.choice(string.ascii_lowercase) + name[i:]


def generate_inputs(entity_type: str, count: int) -> list[tuple[str, str]]:
    """Misspelled field ids paired with the id they came from."""
    ids = [field.id for field in get_static_fields(entity_type)]
    return [(misspell(target), target) for target in random.choices(ids, k=count)]


class SlowFieldSource(RemoteFieldSource):
    """Field source with a fixed upstream latency."""

    def __init__(self, latency: float, field_count: int):
        self.latency = latency
        self.calls = 0
        self.records = [
            {
                "id": f"customfield_{10000 + i}",
                "name": f"Custom Field {i}",
                "custom": True,
                "schema": {"type": "string"},
            }
            for i in range(field_count)
        ]

    async def fetch_remote_fields(self, entity_type: str) -> list[dict]:
        self.calls += 1
        await asyncio.sleep(self.latency)
        return self.records


# =============================================================================
# Benchmark Runner
# =============================================================================

class Benchmark:
    """Suggestion and cache benchmark."""

    def __init__(self, iterations: int, readers: int, latency: float, field_count: int):
        self.iterations = iterations
        self.readers = readers
        self.latency = latency
        self.field_count = field_count
        self.results: dict = {"metrics": {}}

    def log(self, msg: str):
        """Print with timestamp."""
        ts = datetime.now().strftime("%H:%M:%S")
        print(f"[{ts}] {msg}")

    def test_suggestions(self):
        """Time suggestions for misspelled ids and measure top-1 accuracy."""
        self.log("Benchmarking static suggestions...")
        engine = StaticSuggestionEngine()

        for entity_type in EntityType.values():
            inputs = generate_inputs(entity_type, self.iterations)
            hits = 0
            start = time.perf_counter()
            for typed, target in inputs:
                suggestions = engine.suggest(entity_type, typed, 5)
                if suggestions and suggestions[0] == target:
                    hits += 1
            elapsed = time.perf_counter() - start

            per_call_ms = elapsed / len(inputs) * 1000
            accuracy = hits / len(inputs)
            self.results["metrics"][f"{entity_type}_suggest_ms"] = per_call_ms
            self.results["metrics"][f"{entity_type}_top1_accuracy"] = accuracy
            self.log(f"  {entity_type}: {per_call_ms:.3f} ms/call, top-1 accuracy {accuracy:.1%}")

    async def _cache_round(self, cache: DynamicFieldCache) -> float:
        start = time.perf_counter()
        await asyncio.gather(
            *(cache.discover_dynamic_fields("issue") for _ in range(self.readers))
        )
        return time.perf_counter() - start

    async def _test_cache(self):
        source = SlowFieldSource(self.latency, self.field_count)
        cache = DynamicFieldCache(source, ttl_seconds=3600, max_entries=10)

        cold = await self._cache_round(cache)
        self.results["metrics"]["cache_cold_seconds"] = cold
        self.log(f"  Cold: {self.readers} readers in {cold * 1000:.1f} ms")

        warm = await self._cache_round(cache)
        self.results["metrics"]["cache_warm_seconds"] = warm
        self.log(f"  Warm: {self.readers} readers in {warm * 1000:.1f} ms")

        self.results["metrics"]["upstream_calls"] = source.calls
        self.log(f"  Upstream calls: {source.calls}")
        assert source.calls == 1, f"Expected one upstream call, got {source.calls}"

    def test_cache(self):
        """Concurrent readers against a cold then warm cache."""
        self.log("Benchmarking dynamic field cache...")
        asyncio.run(self._test_cache())

    def run(self, suggestions: bool = True, cache: bool = True) -> dict:
        """Run the selected benchmarks."""
        overall_start = time.time()
        try:
            if suggestions:
                self.test_suggestions()
            if cache:
                self.test_cache()
            self.results["status"] = "success"
        except Exception as e:
            self.log(f"ERROR: {e}")
            self.results["status"] = "failed"
            self.results["error"] = str(e)
            raise

        total_time = time.time() - overall_start
        self.results["metrics"]["total_seconds"] = total_time
        self.log(f"Benchmark completed in {total_time:.1f}s")
        return self.results


def main():
    parser = argparse.ArgumentParser(description="jirafields Benchmark")
    parser.add_argument("--iterations", type=int, default=1000,
                        help="Suggestion lookups per entity type")
    parser.add_argument("--readers", type=int, default=100, help="Concurrent cache readers")
    parser.add_argument("--latency", type=float, default=0.2,
                        help="Simulated upstream latency in seconds")
    parser.add_argument("--fields", type=int, default=500, help="Custom fields returned upstream")
    parser.add_argument("--suggestions-only", action="store_true", help="Skip the cache benchmark")
    parser.add_argument("--cache-only", action="store_true", help="Skip the suggestion benchmark")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for inputs")
    parser.add_argument("--output", type=str, default=None, help="Write results to a JSON file")
    args = parser.parse_args()

    if args.suggestions_only and args.cache_only:
        print("ERROR: --suggestions-only and --cache-only are mutually exclusive")
        sys.exit(1)
    if args.seed is not None:
        random.seed(args.seed)

    bench = Benchmark(args.iterations, args.readers, args.latency, args.fields)
    results = bench.run(suggestions=not args.cache_only, cache=not args.suggestions_only)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nFull results saved to: {args.output}")


if __name__ == "__main__":
    main()
