import time
import numpy as np
import cachematrix

def benchmark_inverse(n, dtype, iterations=50):
    print(f"\n--- Benchmarking cached inverse (N={n}, {dtype.__name__}) ---")

    a_np = np.random.rand(n, n).astype(dtype)
    # Make it diagonally dominant to ensure invertibility
    a_np += np.eye(n, dtype=dtype) * n

    x = cachematrix.CacheMatrix(a_np)

    # Cold: first call pays for the inversion
    start = time.perf_counter()
    cachematrix.cache_solve(x)
    cold = time.perf_counter() - start
    print(f"cache_solve (cold): {cold:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        cachematrix.cache_solve(x)
    warm = (time.perf_counter() - start) / iterations
    print(f"cache_solve (warm): {warm:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        np.linalg.inv(a_np)
    np_time = (time.perf_counter() - start) / iterations
    print(f"NumPy inv:          {np_time:.6f} s")

    speedup = np_time / warm if warm > 0 else 0
    print(f"Speedup (warm vs NumPy): {speedup:.1f}x")

def benchmark_invalidation(n, iterations=10):
    print(f"\n--- Benchmarking set_matrix + recompute (N={n}) ---")
    x = cachematrix.CacheMatrix(np.eye(n))

    start = time.perf_counter()
    for i in range(iterations):
        x.set_matrix(np.eye(n) * (i + 2))
        cachematrix.cache_solve(x)
    per_cycle = (time.perf_counter() - start) / iterations
    print(f"set_matrix + cache_solve: {per_cycle:.6f} s")

if __name__ == "__main__":
    for solver in ("inv", "solve"):
        cachematrix.set_solver(solver)
        print(f"\n=== solver: {cachematrix.get_solver()} ===")
        for n in (100, 500):
            benchmark_inverse(n, np.float64)
        benchmark_inverse(500, np.float32)
        benchmark_invalidation(500)
