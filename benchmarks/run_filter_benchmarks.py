"""Benchmark Trie.filter over growing dictionaries and text sizes."""

import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path

import matplotlib.pyplot as plt
import psutil

from src.word_filter.dictionary import build_trie

DICTIONARY_SIZES = [10, 100, 1000, 10000]
TEXT_SIZES = [1_000, 10_000, 100_000]
WORD_LENGTHS = (2, 8)
REPLACEMENT = "***"
RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "filter_results"
)


def random_words(count: int, rng: random.Random) -> list[str]:
    """Generate `count` random lowercase words.

    Args:
        count (int): The number of words.
        rng (random.Random): The random generator to draw from.

    Returns:
        list[str]: The generated words.

    """
    return [
        "".join(
            rng.choices(string.ascii_lowercase, k=rng.randint(*WORD_LENGTHS)),
        )
        for _ in range(count)
    ]


def benchmark_dictionary(
    dictionary_size: int,
    rng: random.Random,
) -> dict[str, dict[str, float]]:
    """Time filtering of every text size against one dictionary.

    Args:
        dictionary_size (int): The number of dictionary words.
        rng (random.Random): The random generator to draw from.

    Returns:
        dict[str, dict[str, float]]: Metrics per text size.

    """
    process = psutil.Process()
    words = random_words(dictionary_size, rng)

    tracemalloc.start()
    trie = build_trie(words)
    _, build_peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    results: dict[str, dict[str, float]] = {}
    for text_size in TEXT_SIZES:
        text = "".join(rng.choices(string.ascii_lowercase + " ", k=text_size))

        start_time = time.perf_counter()
        trie.filter(text, REPLACEMENT)
        duration = (time.perf_counter() - start_time) * 1000  # ms

        results[str(text_size)] = {
            "execution_time_ms": duration,
            "build_peak_bytes": build_peak,
            "rss_bytes": process.memory_info().rss,
        }
        print(
            f"Dictionary: {dictionary_size} words, text: {text_size} chars, "
            f"execution time: {duration:.2f} ms",
        )

    return results


def plot_results(results: dict[str, dict[str, dict[str, float]]]) -> None:
    """Save one execution time line per dictionary size."""
    try:
        plt.figure(figsize=(8, 5))
        for dictionary_size, metrics in results.items():
            plt.plot(
                TEXT_SIZES,
                [
                    metrics[str(size)]["execution_time_ms"]
                    for size in TEXT_SIZES
                ],
                marker="o",
                label=f"{dictionary_size} words",
            )
        plt.xscale("log")
        plt.xlabel("Text length (characters)")
        plt.ylabel("Execution Time (ms)")
        plt.title("Trie filter execution time")
        plt.legend()
        plt.tight_layout()
        plt.savefig(RESULTS_DIR / "benchmark_filter.png")
    finally:
        plt.close("all")


def main() -> None:
    """Main function."""
    rng = random.Random(0)
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    results: dict[str, dict[str, dict[str, float]]] = {}
    for dictionary_size in DICTIONARY_SIZES:
        print(f"\n--- Benchmarking {dictionary_size} words ---")
        results[str(dictionary_size)] = benchmark_dictionary(
            dictionary_size,
            rng,
        )
        gc.collect()

    with open(RESULTS_DIR / "results.json", "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)

    plot_results(results)


if __name__ == "__main__":
    main()
