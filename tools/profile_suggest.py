# tools/profile_suggest.py
"""
Small profiling harness for Dictionary.suggest.
Usage:
  python tools/profile_suggest.py --dictionary /usr/share/dict/words --iters 200

Prints mean/median/max latency per strategy and a sample of suggestions.
"""
import argparse
import random
import statistics
import time

from trie_spellcheck.core.dictionary import Dictionary
from trie_spellcheck.core.suggestion_engine import STRATEGIES

# small synthetic vocabulary used when no dictionary file is given
SAMPLE_WORDS = """
the quick brown fox jumps over lazy dog hello world this is a test sentence
please schedule meeting next monday at nine thank you for your contribution
to project could show me latest report cat car cart card care cared cares
""".split()

QUERIES = ["teh", "quikc", "brwn", "helo", "wrold", "projcet", "caat", "raport"]


def benchmark(dictionary, queries, iterations=200):
    times = []
    for _ in range(iterations):
        q = random.choice(queries)
        t0 = time.perf_counter()
        _ = dictionary.suggest(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    return {
        "count": len(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "max_ms": max(times),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dictionary", help="vocabulary file (defaults to a built-in sample)")
    parser.add_argument("--iters", type=int, default=200, help="measured iterations per strategy")
    parser.add_argument("--max-distance", type=int, default=1)
    args = parser.parse_args()

    source = args.dictionary or SAMPLE_WORDS
    for strategy in STRATEGIES:
        d = Dictionary.load(source, strategy=strategy, max_distance=args.max_distance)
        benchmark(d, QUERIES, iterations=10)  # warmup
        s = summarize(benchmark(d, QUERIES, iterations=args.iters))
        print("%-7s mean=%.3f median=%.3f max=%.3f (ms, %d runs)" % (
            strategy, s["mean_ms"], s["median_ms"], s["max_ms"], s["count"]))

    print("Sample suggest output:", {q: d.suggest(q) for q in QUERIES[:3]})


if __name__ == "__main__":
    main()
