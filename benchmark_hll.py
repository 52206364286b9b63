#!/usr/bin/env python3
import time
import random
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from hllcount.lib import HyperLogLog, ExactCounter

# Set random seed for reproducibility
random.seed(42)
np.random.seed(42)

def generate_data(size, unique_ratio=1.0):
    """Generate test data with controlled uniqueness."""
    unique_count = max(1, int(size * unique_ratio))
    if unique_ratio >= 1.0:
        return [f"item_{i}" for i in range(size)]
    unique_items = [f"unique_item_{i}" for i in range(unique_count)]
    # Every unique item appears at least once, the rest are repeats
    result = list(unique_items)
    result.extend(random.choice(unique_items) for _ in range(size - unique_count))
    random.shuffle(result)
    return result

def fill(sketch, data):
    """Add data to a sketch and return elapsed seconds."""
    start_time = time.time()
    sketch.add_batch(data)
    return time.time() - start_time

def benchmark_add(data_sizes, precision=12):
    """Benchmark adding items to HyperLogLog and ExactCounter."""
    results = {"HyperLogLog": [], "ExactCounter": []}

    for size in data_sizes:
        data = generate_data(size)
        for name, sketch in (("HyperLogLog", HyperLogLog(precision=precision)),
                             ("ExactCounter", ExactCounter())):
            elapsed = fill(sketch, data)
            results[name].append(elapsed)
            print(f"{name}: Added {size} items in {elapsed:.4f}s "
                  f"({sketch.memory_bytes()} bytes)")

    return results

def benchmark_count(data_sizes, precision=12):
    """Benchmark cardinality estimation time."""
    results = {"HyperLogLog": []}

    for size in data_sizes:
        sketch = HyperLogLog(precision=precision)
        fill(sketch, generate_data(size))

        start_time = time.time()
        for _ in range(10):  # Run multiple times for more stable measurements
            sketch.count()
        elapsed = (time.time() - start_time) / 10
        results["HyperLogLog"].append(elapsed)

        print(f"HyperLogLog: Counted {size} items in {elapsed:.6f}s")

    return results

def benchmark_accuracy(data_sizes, precisions, bias_correction='fixed', unique_ratio=1.0):
    """Benchmark estimation accuracy against the exact count."""
    results = {f"p={p}": {"error": [], "estimate": []} for p in precisions}

    for size in data_sizes:
        data = generate_data(size, unique_ratio=unique_ratio)
        exact = ExactCounter()
        exact.add_batch(data)
        truth = exact.count()

        for p in precisions:
            sketch = HyperLogLog(precision=p, bias_correction=bias_correction)
            sketch.add_batch(data)
            estimate = sketch.count()

            error = abs(estimate - truth) / truth * 100
            results[f"p={p}"]["error"].append(error)
            results[f"p={p}"]["estimate"].append(estimate)

            print(f"p={p} ({bias_correction}): Distinct {truth}, Estimate {estimate}, "
                  f"Error {error:.2f}% (standard error {sketch.standard_error() * 100:.2f}%)")

    return results

def plot_results(title, x_data, y_data, x_label, y_label, legend_loc='upper left'):
    """Plot benchmark results."""
    plt.figure(figsize=(10, 6))

    for name, data in y_data.items():
        plt.plot(x_data, data, marker='o', linewidth=2, label=name)

    plt.title(title)
    plt.xlabel(x_label)
    plt.ylabel(y_label)
    plt.xscale('log')
    plt.grid(True, linestyle='--', alpha=0.7)
    plt.legend(loc=legend_loc)
    plt.tight_layout()

    # Save to file
    filename = title.lower().replace(' ', '_') + '.png'
    plt.savefig(filename)
    print(f"Saved plot to {filename}")

    plt.close()

def run_benchmarks():
    """Run all benchmarks."""
    sizes = [100, 1000, 5000, 10000, 50000, 100000]
    precisions = [10, 12, 14, 16]

    print("\n=== Benchmarking Add Operation ===")
    add_results = benchmark_add(sizes)
    plot_results("HyperLogLog Add Performance", sizes, add_results,
                 "Number of Items", "Time (seconds)")

    print("\n=== Benchmarking Cardinality Estimation ===")
    count_results = benchmark_count(sizes)
    plot_results("HyperLogLog Count Performance", sizes, count_results,
                 "Number of Items", "Time (seconds)")

    for bias_correction in ("fixed", "flajolet"):
        print(f"\n=== Benchmarking Estimation Accuracy ({bias_correction} alpha) ===")
        accuracy = benchmark_accuracy(sizes, precisions, bias_correction=bias_correction)
        plot_results(f"HyperLogLog Estimation Error {bias_correction}", sizes,
                     {name: data["error"] for name, data in accuracy.items()},
                     "Number of Distinct Items", "Error (%)", legend_loc='upper right')

if __name__ == "__main__":
    run_benchmarks()
