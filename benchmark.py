#!/usr/bin/env python3
"""
Benchmark suite for MessagePack/JSON converter performance.

Measures conversion throughput, memory and MessagePack size savings for
payloads of different shapes and sizes.
"""

import base64
import json
import statistics
from typing import Any, Dict
from msgpack_json import MessagePackJsonConverter
from msgpack_json.profiler import PerformanceProfiler


class BenchmarkSuite:
    """Benchmark suite for the converter."""

    def __init__(self, iterations: int = 5):
        """Initialize the benchmark suite."""
        self.iterations = iterations
        self.converter = MessagePackJsonConverter()

    def create_test_dataset(self, size_category: str) -> Dict[str, Any]:
        """Create test datasets of different sizes."""
        if size_category == "small":
            return {
                "users": {f"user_{i}": {"name": f"User {i}", "data": f"data_{i}"} for i in range(50)},
                "posts": [{"id": i, "content": f"Post content {i}"} for i in range(100)]
            }
        elif size_category == "medium":
            return {
                "users": {
                    f"user_{i}": {
                        "name": f"User {i}",
                        "profile": {"age": 20 + i % 50, "city": f"City {i % 20}"},
                        "posts": [f"post_{j}" for j in range(i % 10)]
                    } for i in range(500)
                },
                "analytics": {
                    f"day_{i}": {"views": i * 100, "clicks": i * 10, "ratio": i / 365} for i in range(365)
                }
            }
        elif size_category == "large":
            return {
                "dataset": {
                    f"section_{i}": {
                        f"item_{j}": {
                            "id": j,
                            "data": f"Large data content {j} " * 20,
                            "metadata": {"created": f"2024-01-{(j%30)+1}", "tags": [f"tag_{k}" for k in range(j%5)]}
                        } for j in range(200)
                    } for i in range(50)
                }
            }
        else:
            raise ValueError(f"Unknown size category: {size_category}")

    def benchmark_dataset_sizes(self) -> Dict[str, Any]:
        """Benchmark both directions for each dataset size."""
        print("📊 Benchmarking Dataset Sizes...")

        results = {}

        for category in ("small", "medium", "large"):
            print(f"   Testing {category} dataset...")

            json_string = json.dumps(self.create_test_dataset(category))
            input_size = len(json_string.encode("utf-8"))
            profiler = PerformanceProfiler()

            for _ in range(self.iterations):
                with profiler.profile_operation("to_msgpack", input_size):
                    packed = self.converter.json_to_messagepack(json_string)
                    profiler.record_output(len(packed.output), packed.success)

                with profiler.profile_operation("to_json", len(packed.output)):
                    restored = self.converter.messagepack_to_json(packed.output)
                    profiler.record_output(len(restored.output), restored.success)

            to_msgpack = [m for m in profiler.metrics_history if m.operation_name == "to_msgpack"]
            to_json = [m for m in profiler.metrics_history if m.operation_name == "to_json"]
            packed_bytes = len(base64.b64decode(packed.output))

            results[category] = {
                "input_kb": input_size / 1024,
                "msgpack_kb": packed_bytes / 1024,
                "size_ratio": packed_bytes / input_size,
                "encode_time": statistics.mean(m.duration for m in to_msgpack),
                "decode_time": statistics.mean(m.duration for m in to_json),
                "encode_mbps": statistics.mean(m.throughput_mbps for m in to_msgpack),
                "memory_peak_mb": max(m.memory_peak_mb for m in profiler.metrics_history)
            }

        return results

    def benchmark_key_order(self) -> Dict[str, Any]:
        """Compare sorted and insertion-order conversions."""
        print("⚙️  Benchmarking Key Order Settings...")

        json_string = json.dumps(self.create_test_dataset("medium"))
        results = {}

        for label, sort_keys in (("sorted", True), ("insertion", False)):
            converter = MessagePackJsonConverter(sort_keys=sort_keys)
            profiler = PerformanceProfiler()

            for _ in range(self.iterations):
                with profiler.profile_operation(label, len(json_string)):
                    packed = converter.json_to_messagepack(json_string)
                    profiler.record_output(len(packed.output), packed.success)

            results[label] = {
                "avg_time": statistics.mean(m.duration for m in profiler.metrics_history),
                "std_time": statistics.stdev(m.duration for m in profiler.metrics_history)
                if self.iterations > 1 else 0
            }

        return results

    def print_results(self, results: Dict[str, Any], title: str):
        """Print benchmark results in a formatted table."""
        print(f"\n📈 {title}")
        print("=" * 80)

        if not results:
            print("No results to display.")
            return

        # Determine columns based on first result
        first_key = next(iter(results.keys()))
        columns = list(results[first_key].keys())

        header = f"{'Config':<15}"
        for col in columns:
            header += f"{col:<15}"
        print(header)
        print("-" * len(header))

        for config, data in results.items():
            row = f"{config:<15}"
            for col in columns:
                value = data.get(col, 0)
                if isinstance(value, float):
                    if col.endswith('_time'):
                        row += f"{value:<15.5f}"
                    else:
                        row += f"{value:<15.2f}"
                else:
                    row += f"{value:<15}"
            print(row)

    def run_comprehensive_benchmark(self):
        """Run the complete benchmark suite."""
        print("🚀 MessagePack/JSON Converter Benchmark Suite")
        print("=" * 60)

        self.print_results(self.benchmark_dataset_sizes(), "Dataset Size Scaling")
        self.print_results(self.benchmark_key_order(), "Key Order Impact")


def main():
    """Run the benchmark suite."""
    BenchmarkSuite().run_comprehensive_benchmark()


if __name__ == "__main__":
    main()
