"""
Benchmark transformation building and point application (Numba kernel).
"""

import time

import numpy as np

from rigidkit import DHParams, dh_chain, rotate

N = 1_000_000
NUM_ITERATIONS = 100

print("=" * 80)
print("TRANSFORMATION BUILDER BENCHMARK")
print(f"Testing with {N:,} points, {NUM_ITERATIONS} iterations")
print("=" * 80)

# Setup
points_np = np.random.randn(N, 3)


def build():
    return (
        rotate()
        .local().xd(30).yd(12)
        .global_().zd(180)
        .local().x(np.pi / 2)
        .translate().x(1.0).y(2.0).z(3.0)
    )


# Builder construction
print("\nBuilding chains...")
times = []
for _ in range(NUM_ITERATIONS * 10):
    start = time.perf_counter()
    build().matrix()
    times.append((time.perf_counter() - start) * 1e6)

print(f"  Chain + resolve: {np.mean(times):.1f} us +/- {np.std(times):.1f} us")

# DH chain
links = [DHParams(0.1 * i, 0.2, 0.3, np.pi / 2) for i in range(6)]
times = []
for _ in range(NUM_ITERATIONS * 10):
    start = time.perf_counter()
    dh_chain(links).matrix()
    times.append((time.perf_counter() - start) * 1e6)

print(f"  6-link DH chain: {np.mean(times):.1f} us +/- {np.std(times):.1f} us")

# Point application
transform = build().resolve()

# Warmup (JIT compile)
print("\nWarming up...")
for _ in range(5):
    transform.apply(points_np)

print(f"Benchmarking {NUM_ITERATIONS} iterations...")
times = []
for _ in range(NUM_ITERATIONS):
    start = time.perf_counter()
    transform.apply(points_np)
    times.append((time.perf_counter() - start) * 1000)

mean_time = np.mean(times)
std_time = np.std(times)

M = transform.matrix()
start = time.perf_counter()
reference = points_np @ M[:3, :3].T + M[:3, 3]
numpy_time = (time.perf_counter() - start) * 1000

print("\nResults (1M points):")
print(f"  Numba:      {mean_time:.3f} ms +/- {std_time:.3f} ms")
print(f"  NumPy:      {numpy_time:.3f} ms (single run)")
print(f"  Throughput: {N / mean_time * 1000 / 1e6:.1f}M points/sec")
print(f"  Max diff:   {np.max(np.abs(transform.apply(points_np) - reference)):.2e}")
