"""
Benchmark helpers for magicquery.

Usage:
    python -m tests.benchmark.bench_queries
    python -m tests.benchmark.bench_queries --size large
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List

import numpy as np


@dataclass
class BenchmarkResult:
    """Container for benchmark results."""
    
    name: str
    dataset_size: int
    
    # Timing metrics
    total_time: float
    mean_time: float
    std_time: float
    min_time: float
    max_time: float
    
    # Throughput metrics
    operations_per_second: float
    
    extra_metrics: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "dataset_size": self.dataset_size,
            "timing": {
                "total_time": self.total_time,
                "mean_time": self.mean_time,
                "std_time": self.std_time,
                "min_time": self.min_time,
                "max_time": self.max_time,
            },
            "throughput": {
                "ops_per_second": self.operations_per_second,
            },
            "extra_metrics": self.extra_metrics,
        }
    
    def __str__(self) -> str:
        return (
            f"{self.name}:\n"
            f"  Dataset: {self.dataset_size} records\n"
            f"  Mean time: {self.mean_time*1000:.3f} ms (+/-{self.std_time*1000:.3f})\n"
            f"  Throughput: {self.operations_per_second:.1f} ops/sec"
        )


class Timer:
    """Context manager for timing operations."""
    
    def __init__(self):
        self.elapsed = 0.0
        self._start = None
    
    def __enter__(self):
        self._start = time.perf_counter()
        return self
    
    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self._start


class BenchmarkRunner:
    """Utility class for running benchmarks."""
    
    def __init__(self, warmup_runs: int = 2, benchmark_runs: int = 10):
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.results: List[BenchmarkResult] = []
    
    def run_benchmark(
        self,
        name: str,
        func: Callable,
        dataset_size: int,
        **extra_metrics
    ) -> BenchmarkResult:
        """Run a benchmark and return results."""
        for _ in range(self.warmup_runs):
            func()
        
        times = []
        for _ in range(self.benchmark_runs):
            with Timer() as t:
                func()
            times.append(t.elapsed)
        
        times = np.array(times)
        
        result = BenchmarkResult(
            name=name,
            dataset_size=dataset_size,
            total_time=float(np.sum(times)),
            mean_time=float(np.mean(times)),
            std_time=float(np.std(times)),
            min_time=float(np.min(times)),
            max_time=float(np.max(times)),
            operations_per_second=float(1.0 / np.mean(times)),
            extra_metrics=extra_metrics,
        )
        
        self.results.append(result)
        return result
    
    def save_results(self, filepath: str):
        """Save all results to JSON file."""
        data = {
            "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
            "results": [r.to_dict() for r in self.results],
        }
        
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
    
    def print_summary(self):
        """Print summary of all results."""
        print("\n" + "=" * 60)
        print("BENCHMARK SUMMARY")
        print("=" * 60)
        for result in self.results:
            print(f"\n{result}")
        print("\n" + "=" * 60)


def generate_records(n_records: int, seed: int = 42) -> List[Dict[str, Any]]:
    """Generate random product-like records."""
    rng = np.random.default_rng(seed)
    categories = ["electronics", "clothing", "books", "food", "toys"]
    prices = rng.uniform(1, 500, n_records)
    ratings = rng.integers(1, 6, n_records)
    
    return [
        {
            "id": i,
            "category": categories[i % len(categories)],
            "price": float(prices[i]),
            "rating": int(ratings[i]),
            "tags": [f"tag_{j}" for j in range(i % 4)],
            "vendor": {"name": f"Vendor {i % 50}", "region": {"code": f"R{i % 7}"}},
        }
        for i in range(n_records)
    ]


SMALL_DATASET = {"n_records": 1000}
MEDIUM_DATASET = {"n_records": 10000}
LARGE_DATASET = {"n_records": 100000}


def get_benchmark_config(size: str = "medium") -> Dict[str, int]:
    """Get benchmark configuration by size name."""
    configs = {
        "small": SMALL_DATASET,
        "medium": MEDIUM_DATASET,
        "large": LARGE_DATASET,
    }
    return configs.get(size, MEDIUM_DATASET)
