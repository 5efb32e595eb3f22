# Copyright (c) 2026 Signer — MIT License

"""Winternitz one-time signatures: hash-based, post-quantum.

Signature:
    WOTS (w = 256) over BLAKE2b-256 — Lamport signature with Winternitz
    compression. 32-byte keys, 1,088-byte signatures. Security rests on the
    hash function alone.

Seed expansion:
    ChaCha20 (RFC 8439) keystream with a fixed nonce — deterministic
    derivation of the 34 chain seeds from the 32-byte secret key.

Secret keys are ONE-TIME: never sign two different messages with one key.
"""

from .wots import (
    generate_key, sign, verify,
    public_key_from_secret, public_key_from_signature,
    checksummed_message_hash, hash_chain,
    EntropySourceError,
    WOTS_SK_SIZE, WOTS_PK_SIZE, WOTS_SIG_SIZE,
)
from .chacha20prng import expand, ChaCha20PRNG, CHACHA20_SEED_SIZE

__all__ = [
    # Signature
    "generate_key", "sign", "verify",
    "public_key_from_secret", "public_key_from_signature",
    "checksummed_message_hash", "hash_chain",
    "EntropySourceError",
    "WOTS_SK_SIZE", "WOTS_PK_SIZE", "WOTS_SIG_SIZE",
    # Seed expansion
    "expand", "ChaCha20PRNG", "CHACHA20_SEED_SIZE",
]
