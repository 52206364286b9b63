"""
Example usage of HyperLogLog for cardinality estimation.
"""
from hllcount import HyperLogLog, ExactCounter

def main():
    """Demonstrate basic usage of HyperLogLog."""

    # Create a sketch with precision 16 (65536 registers, ~0.4% standard error)
    sketch = HyperLogLog(precision=16)

    # Add some byte strings
    for name in [b"Sigma Balls", b"Ridho", b"Rizki", b"Juli", b"Juli", b"Siti"]:
        sketch.add(name)  # "Juli" twice, counted once

    print(f"Estimated cardinality: {sketch.count()}")

    # Compare against an exact counter on a bigger stream
    exact = ExactCounter()
    for i in range(100000):
        item = f"item{i % 40000}"
        sketch.add_string(item)
        exact.add_string(item)

    print(f"Estimated cardinality after 100000 adds: {sketch.count()}")
    print(f"Exact cardinality: {exact.count() + 5}")  # plus the five names
    print(f"Sketch memory: {sketch.memory_bytes()} bytes, "
          f"standard error {sketch.standard_error():.2%}")

if __name__ == "__main__":
    main()
