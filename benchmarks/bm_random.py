"""Timing for filling a 100x100 array from a normal distribution.

Run with `python benchmarks/bm_random.py`. Compares a float64 fill with
a float32 fill through F32, each on a fresh KeyStream.
"""

from __future__ import annotations

import timeit

from jax_ndrand import F32, KeyStream, Normal, random_using

M = 100
REPEAT = 5


def norm_f32():
    return random_using((M, M), F32(Normal(0.0, 1.0)), KeyStream(0))


def norm_f64():
    return random_using((M, M), Normal(0.0, 1.0), KeyStream(0))


def main():
    for fn in (norm_f32, norm_f64):
        fn()  # warm up jax
        best = min(timeit.repeat(fn, number=1, repeat=REPEAT))
        print(f"{fn.__name__}: {best * 1e3:.2f} ms per {M}x{M} array")


if __name__ == "__main__":
    main()
