# Copyright (c) 2026 Signer — MIT License

"""ChaCha20 keystream expander (deterministic CSPRNG).

Turns a 32-byte seed into an arbitrarily long pseudorandom byte stream by
running ChaCha20 (RFC 8439) over zero bytes. The nonce is not caller
supplied: it is the 32-bit little-endian ``run`` number followed by eight
zero bytes, and the block counter starts at 0. Winternitz key derivation
always uses run 0, so the stream is a pure function of the seed.

Public API:
    expand(seed, out_len, run=0) -> bytes
    ChaCha20PRNG(seed, run=0).read(n) -> bytes   (streaming reader)
"""

import struct

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

CHACHA20_SEED_SIZE = 32

_NONCE_PAD = b"\x00" * 8
_INITIAL_COUNTER = b"\x00" * 4


def _keystream_encryptor(seed, run):
    if len(seed) != CHACHA20_SEED_SIZE:
        raise ValueError(
            f"ChaCha20 seed must be {CHACHA20_SEED_SIZE} bytes, got {len(seed)}"
        )
    if not 0 <= run <= 0xFFFFFFFF:
        raise ValueError(f"run must fit in 32 bits, got {run}")

    # cryptography takes a 16-byte nonce: counter (LE u32) || 96-bit nonce
    nonce = _INITIAL_COUNTER + struct.pack("<I", run) + _NONCE_PAD
    cipher = Cipher(algorithms.ChaCha20(bytes(seed), nonce), mode=None)
    return cipher.encryptor()


class ChaCha20PRNG:
    """Deterministic byte reader over a ChaCha20 keystream.

    Consecutive reads continue the same stream, so ``read(a) + read(b)``
    equals ``expand(seed, a + b, run)``. Usable directly as the ``rand``
    argument of ``winternitz.generate_key``.
    """

    def __init__(self, seed, run=0):
        self._encryptor = _keystream_encryptor(seed, run)

    def read(self, n):
        if n < 0:
            raise ValueError(f"read length must be >= 0, got {n}")
        return self._encryptor.update(b"\x00" * n)


def expand(seed, out_len, run=0):
    """Return the first ``out_len`` keystream bytes for ``seed``.

    Args:
        seed: 32-byte ChaCha20 key.
        out_len: Number of bytes to produce (>= 0).
        run: Stream selector encoded into the fixed nonce (default 0).

    Returns:
        ``out_len`` deterministic pseudorandom bytes.
    """
    if out_len < 0:
        raise ValueError(f"out_len must be >= 0, got {out_len}")
    return _keystream_encryptor(seed, run).update(b"\x00" * out_len)
