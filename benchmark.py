import logging
import random
import statistics
import time
import tracemalloc
from typing import Optional

from pydantic import BaseModel

from heapqueue import HeapConfig, PriorityHeap

logger = logging.getLogger(__name__)


class BenchmarkReport(BaseModel):
    items: int
    insert_seconds: float
    extract_seconds: float
    throughput: float
    p50_us: float
    p95_us: float
    p99_us: float
    peak_memory_bytes: int
    ordered: bool


class HeapBenchmark:
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.latencies = []

    def _percentiles(self):
        p50 = statistics.median(self.latencies)
        p95 = statistics.quantiles(self.latencies, n=20)[18] if len(self.latencies) >= 20 else max(self.latencies)
        p99 = statistics.quantiles(self.latencies, n=100)[98] if len(self.latencies) >= 100 else max(self.latencies)
        return p50, p95, p99

    def run(self, num_items: int = 10000, null_ratio: float = 0.1) -> BenchmarkReport:
        """Insert num_items random entries, then drain the heap.

        Roughly null_ratio of the entries carry no priority.
        """
        self.latencies = []
        heap = PriorityHeap(HeapConfig(name="benchmark"))
        priorities = [
            None if self.rng.random() < null_ratio else self.rng.randint(0, 100)
            for _ in range(num_items)
        ]

        tracemalloc.start()
        start_time = time.perf_counter()
        for i, priority in enumerate(priorities):
            op_start = time.perf_counter()
            heap.insert(i, priority)
            self.latencies.append((time.perf_counter() - op_start) * 1_000_000)
        insert_seconds = time.perf_counter() - start_time

        start_time = time.perf_counter()
        extracted = []
        while not heap.is_empty():
            op_start = time.perf_counter()
            extracted.append(heap.extract_max())
            self.latencies.append((time.perf_counter() - op_start) * 1_000_000)
        extract_seconds = time.perf_counter() - start_time
        peak_memory = tracemalloc.get_traced_memory()[1]
        tracemalloc.stop()

        ordered = self._is_non_increasing(extracted, priorities)
        if not ordered:
            logger.error("benchmark run of %d items extracted out of order", num_items)

        p50, p95, p99 = self._percentiles() if self.latencies else (0.0, 0.0, 0.0)
        total = insert_seconds + extract_seconds
        return BenchmarkReport(
            items=num_items,
            insert_seconds=insert_seconds,
            extract_seconds=extract_seconds,
            throughput=(2 * num_items / total) if total > 0 else 0.0,
            p50_us=p50,
            p95_us=p95,
            p99_us=p99,
            peak_memory_bytes=peak_memory,
            ordered=ordered,
        )

    @staticmethod
    def _is_non_increasing(extracted, priorities):
        # Values are insertion indexes, so they double as sequence numbers
        for prev, cur in zip(extracted, extracted[1:]):
            p_prev, p_cur = priorities[prev], priorities[cur]
            if p_prev is None:
                if p_cur is not None or cur < prev:
                    return False
            elif p_cur is not None:
                if p_cur > p_prev or (p_cur == p_prev and cur < prev):
                    return False
        return len(extracted) == len(priorities)


def print_report(report: BenchmarkReport):
    print(f"\n{'=' * 60}")
    print(f"  PriorityHeap ({report.items} items)")
    print(f"{'=' * 60}")
    print(f"  Insert:      {report.insert_seconds:.3f}s")
    print(f"  Extract:     {report.extract_seconds:.3f}s")
    print(f"  Throughput:  {report.throughput:,.0f} ops/s")
    print(f"  p50 Latency: {report.p50_us:.2f}us")
    print(f"  p95 Latency: {report.p95_us:.2f}us")
    print(f"  p99 Latency: {report.p99_us:.2f}us")
    print(f"  Peak Memory: {report.peak_memory_bytes / 1024:.1f} KB")
    print(f"  Ordered:     {'PASS' if report.ordered else 'FAIL'}")
    print(f"{'=' * 60}")


def main():
    logging.basicConfig(level=logging.INFO)
    benchmark = HeapBenchmark(seed=42)
    for size in (1000, 10000, 100000):
        print_report(benchmark.run(num_items=size))


if __name__ == "__main__":
    main()
