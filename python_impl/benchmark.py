"""Salted Bloom filter benchmark.

Performs a deterministic 80/20 split of synthetic unique strings, builds one
filter per match mode with the 80% training set, and runs:

1. Membership test on training set (should be all present)
2. False positive rate on the held-out set, against the predicted rate
3. Collision analysis using simple modifications of held-out strings
4. Filter properties and memory usage
5. Insertion and query throughput

Run with:

    python -m python_impl.benchmark
"""
from __future__ import annotations

import time
import uuid
from typing import Tuple

from salted_bf.bloom_filter import BloomFilter
from salted_bf.sizing import fill_ratio, predicted_false_positive_rate

NUM_ITEMS = 20_000
DESIRED_FPR = 0.01
DIGEST_ALGORITHM = "sha1"


def generate_synthetic_data(n: int) -> list[str]:
    """Generate n unique random strings."""
    print(f"Generating {n} synthetic items...")
    return [str(uuid.uuid4()) for _ in range(n)]


def build_split(words: list[str], match: str) -> Tuple[BloomFilter, list[str], list[str]]:
    """Create deterministic 80/20 split and build the bloom filter.

    Returns (bloom_filter, training_words, test_words).
    """
    split = int(len(words) * 0.8)
    train = words[:split]
    test = words[split:]

    bloom = BloomFilter(
        expected_items=max(1, len(train)),
        desired_false_positive_rate=DESIRED_FPR,
        digest_algorithm=DIGEST_ALGORITHM,
        match=match,
    )
    bloom.update(train)

    return bloom, train, test


def check_membership(bloom: BloomFilter, train: list[str]) -> None:
    """Verify all training items are present in the filter."""
    print("TEST A: Membership on training set")
    missing = [w for w in train if w not in bloom]
    print(f"  Training items: {len(train)}")
    print(f"  Missing after insertion: {len(missing)} (expected 0)")
    if missing:
        print(f"  Example missing: {missing[:5]}")
    print()


def check_false_positives(bloom: BloomFilter, train: list[str], test: list[str]) -> float:
    """Measure empirical false positive rate on the held-out set."""
    print("TEST B: False positive rate on held-out strings")
    train_set = set(train)
    test_filtered = [w for w in test if w not in train_set]
    if not test_filtered:
        print("  No held-out strings available for testing.")
        return 0.0

    false_positives = sum(1 for w in test_filtered if w in bloom)
    fpr = false_positives / len(test_filtered)
    fill = bloom.activated_count / bloom.max_items
    predicted = predicted_false_positive_rate(fill, bloom.number_of_functions, bloom.match)
    expected_fill = fill_ratio(bloom.max_items, bloom.number_of_functions, len(train))

    print(f"  Held-out strings: {len(test_filtered)}")
    print(f"  False positives: {false_positives}")
    print(f"  Empirical FPR: {fpr:.6f} ({fpr*100:.4f}%)")
    print(f"  Predicted FPR ({bloom.match}): {predicted:.6f}")
    print(f"  Configured FPR: {DESIRED_FPR:.6f}")
    print(f"  Fill ratio: {fill:.4f} (expected {expected_fill:.4f})")
    print()
    return fpr


def check_collisions(bloom: BloomFilter, train: list[str], test: list[str]) -> None:
    """Analyze collision rate using simple modifications of held-out strings."""
    print("TEST C: Collision analysis with simple modifications of held-out strings")
    modifications = []
    for word in test[:500]:
        modifications.append(word + "x")
        modifications.append(word[:-1] + "z")
        modifications.append("x" + word)

    known = set(train) | set(test)
    modifications = [m for m in modifications if m not in known]
    if not modifications:
        print("  No modifications available for testing.")
        return

    false_positives = sum(1 for m in modifications if m in bloom)
    rate = false_positives / len(modifications)

    print(f"  Variants tested: {len(modifications)}")
    print(f"  False positives from variants: {false_positives}")
    print(f"  Collision rate: {rate:.6f} ({rate*100:.4f}%)")
    print()


def show_properties(bloom: BloomFilter, train: list[str]) -> None:
    """Display filter memory and configuration properties."""
    print("TEST D: Filter properties")
    bytes_len = len(bloom.bit_array)

    print(f"  Index space (bits): {bloom.max_items}")
    print(f"  Filter size (bytes): {bytes_len}")
    print(f"  Number of hash functions: {bloom.number_of_functions}")
    print(f"  Digest algorithm: {bloom.digest_algorithm}")
    print(f"  Words inserted: {len(train)}")
    print(f"  Bytes per word: {bytes_len / len(train):.4f}")
    print()


def measure_performance(bloom: BloomFilter, train: list[str], test: list[str]) -> dict:
    """Measure insertion and query throughput (Ops/Sec)."""
    print("TEST E: Performance Benchmarking")
    bench_filter = BloomFilter(
        expected_items=bloom.expected_items,
        max_items=bloom.max_items,
        desired_false_positive_rate=DESIRED_FPR,
        digest_algorithm=bloom.digest_algorithm,
        match=bloom.match,
    )

    start_time = time.perf_counter()
    bench_filter.update(train)
    insert_time = time.perf_counter() - start_time
    insert_ops = len(train) / insert_time if insert_time > 0 else float("inf")
    print(f"    - Inserted {len(train)} items in {insert_time:.4f} sec")
    print(f"    - Insertion Throughput: {insert_ops:,.0f} ops/sec")

    start_time = time.perf_counter()
    for word in test:
        _ = word in bench_filter
    query_time = time.perf_counter() - start_time
    query_ops = len(test) / query_time if query_time > 0 else float("inf")
    print(f"    - Performed {len(test)} queries in {query_time:.4f} sec")
    print(f"    - Query Throughput: {query_ops:,.0f} ops/sec")
    print()

    return {"insert_ops_per_sec": insert_ops, "query_ops_per_sec": query_ops}


def run_all() -> None:
    """Run the benchmark for both match modes."""
    words = generate_synthetic_data(NUM_ITEMS)
    rates = {}

    for match in ("any", "all"):
        print("=" * 60)
        print(f"Running salted Bloom filter benchmark (match={match})")
        print("=" * 60)
        print()

        bloom, train, test = build_split(words, match)
        check_membership(bloom, train)
        rates[match] = check_false_positives(bloom, train, test)
        check_collisions(bloom, train, test)
        show_properties(bloom, train)
        measure_performance(bloom, train, test)

    print("=" * 60)
    print("COMPARISON: Empirical false positive rate")
    print("=" * 60)
    print(f"{'Match mode':<20}{'Empirical FPR':>18}")
    print("-" * 38)
    for match, rate in rates.items():
        print(f"{match:<20}{rate:>18.6f}")
    print()


if __name__ == "__main__":
    run_all()
