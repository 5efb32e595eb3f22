# Copyright (c) 2026 Signer — MIT License

"""Timing harness for Winternitz key generation and sign+verify.

Keys are drawn from a deterministic all-zero-seed ChaCha20 stream so that
runs are repeatable.

Run from the repository root:
    python -m tools.bench_winternitz [-n ITERATIONS]
"""

import argparse
import os
import sys
import time

# Ensure project root is on the import path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from winternitz import generate_key, sign, verify, ChaCha20PRNG

_MESSAGE = b"message"


def bench_generate_key(iterations):
    rng = ChaCha20PRNG(bytes(32))
    t0 = time.perf_counter()
    for _ in range(iterations):
        generate_key(rng)
    return (time.perf_counter() - t0) / iterations


def bench_sign_verify(iterations):
    # Re-signing the same message with one key reveals nothing new.
    pk, sk = generate_key(ChaCha20PRNG(bytes(32)))
    t0 = time.perf_counter()
    for _ in range(iterations):
        sig = sign(sk, _MESSAGE)
        if not verify(pk, _MESSAGE, sig):
            raise RuntimeError("verify failed during benchmark")
    return (time.perf_counter() - t0) / iterations


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-n", "--iterations", type=int, default=50)
    args = parser.parse_args(argv)

    print(f"Winternitz benchmarks ({args.iterations} iterations)")
    print(f"  generate_key:  {bench_generate_key(args.iterations) * 1e3:8.2f} ms/op")
    print(f"  sign + verify: {bench_sign_verify(args.iterations) * 1e3:8.2f} ms/op")


if __name__ == "__main__":
    main()
