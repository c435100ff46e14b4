# tools/profile_queries.py
"""
Small profiling harness for Lexicon queries.
Usage:
  python tools/profile_queries.py --dict dictionary.csv --iters 500 --index bktree

Prints mean/median/p90/max latency per operation. Without --dict a
synthetic vocabulary is generated.
"""
import argparse
import random
import statistics
import string
import time

from lexicon_engine.core.lexicon import Lexicon
from lexicon_engine.data.sources import load_dictionary


def synthetic_vocab(n=20000, seed=7):
    rnd = random.Random(seed)
    for _ in range(n):
        size = rnd.randint(3, 10)
        yield "".join(rnd.choice(string.ascii_lowercase) for _ in range(size)), ""


def benchmark(fn, queries, iterations):
    times = []
    for _ in range(iterations):
        q = random.choice(queries)
        t0 = time.perf_counter()
        fn(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "mean_ms": round(statistics.mean(times_sorted), 4),
        "median_ms": round(statistics.median(times_sorted), 4),
        "p90_ms": round(times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)], 4),
        "max_ms": round(max(times_sorted), 4),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dict", dest="dict_path", help="dictionary file (.csv/.json)")
    parser.add_argument("--iters", type=int, default=300, help="measured iterations per operation")
    parser.add_argument("--index", choices=["scan", "bktree"], default="scan")
    args = parser.parse_args()

    lex = Lexicon(fuzzy_index=args.index)
    t0 = time.perf_counter()
    if args.dict_path:
        load_dictionary(lex, args.dict_path)
    else:
        lex.load(synthetic_vocab())
    print(f"loaded {len(lex)} words in {time.perf_counter() - t0:.2f}s ({args.index})")

    words = lex.words()
    if not words:
        print("empty dictionary, nothing to profile")
        return
    sample = random.sample(words, min(50, len(words)))
    prefixes = [w[:2] for w in sample]
    typos = [w[:-1] + "x" if w else "x" for w in sample]

    print("lookup :", summarize(benchmark(lex.lookup, sample, args.iters)))
    print("suggest:", summarize(benchmark(lambda p: lex.suggest_prefix(p, 10), prefixes, args.iters)))
    print("correct:", summarize(benchmark(lambda w: lex.correct(w, 2, 5), typos, max(1, args.iters // 10))))


if __name__ == "__main__":
    main()
