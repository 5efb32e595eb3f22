# Copyright (c) 2026 Signer — MIT License

"""Winternitz one-time signatures (w = 256) over BLAKE2b-256.

A Lamport signature with Winternitz compression: every byte of the message
hash, plus two checksum bytes, selects a position on its own hash chain.

Key sizes:
    Secret key:  32 bytes   (ChaCha20 seed)
    Public key:  32 bytes   (BLAKE2b-256 fingerprint of the 34 chain tops)
    Signature:   1,088 bytes (34 chain values of 32 bytes)

Key derivation:
    The secret key seeds a ChaCha20 keystream (fixed nonce, run 0) that is
    cut into 34 chain seeds. Each seed is hashed 255 times to reach its
    chain top, and the public key is the hash of all 34 tops concatenated.

Security: relies only on the preimage and collision resistance of
BLAKE2b-256. No number-theoretic assumptions.

ONE-TIME USE: a secret key must sign at most one message. Each signature
reveals intermediate chain values; signing a second message with the same
key hands out preimages that allow forging signatures on other messages.
Nothing here tracks key usage. Callers must destroy the secret key after
its first signature.

Public API:
    generate_key(rand=os.urandom)          -> (pk_bytes, sk_bytes)
    sign(sk, message)                      -> sig_bytes
    verify(pk, message, sig)               -> bool
    public_key_from_secret(sk)             -> pk_bytes
    public_key_from_signature(message, sig) -> pk_bytes

Not independently audited.
"""

import hashlib
import logging
import os

from .chacha20prng import expand
from ._memory import mlock, munlock, secure_zero

logger = logging.getLogger(__name__)

# ── Parameters ─────────────────────────────────────────────────────

_N = 32                 # Hash output bytes (BLAKE2b-256)
_W = 256                # Winternitz parameter: one chain per message byte
_CHAIN_TOP = _W - 1     # = 255, hash iterations from chain seed to chain top
_LEN1 = _N              # = 32, message-hash chains
_LEN2 = 2               # Checksum chains (max checksum 32*255 = 8160 < 2^16)
_LEN = _LEN1 + _LEN2    # = 34, total chains
_KEY_MATERIAL_SIZE = _LEN * _N  # = 1088

# ── Exported Size Constants ────────────────────────────────────────
WOTS_SK_SIZE = 32
WOTS_PK_SIZE = _N
WOTS_SIG_SIZE = _KEY_MATERIAL_SIZE


class EntropySourceError(Exception):
    """The entropy source could not supply a 32-byte secret key."""


def _hash(data):
    return hashlib.blake2b(data, digest_size=_N).digest()


# ── Hash Chains ────────────────────────────────────────────────────

def hash_chain(value, count):
    """Apply BLAKE2b-256 ``count`` times to ``value``.

    hash_chain(hash_chain(x, k), 255 - k) == hash_chain(x, 255) for any k,
    which is what lets verify finish the walk that sign started.
    """
    if count < 0:
        raise ValueError(f"hash chain iteration count must be >= 0, got {count}")
    h = bytes(value)
    for _ in range(count):
        h = _hash(h)
    return h


def _chain_seeds(sk):
    """Expand the secret key into 34 chain seeds (1,088 mutable bytes)."""
    if len(sk) != WOTS_SK_SIZE:
        raise ValueError(f"secret key must be {WOTS_SK_SIZE} bytes, got {len(sk)}")
    return bytearray(expand(sk, _KEY_MATERIAL_SIZE))


def _chain_tops(sig, positions):
    """Walk every signature element from its position up to the chain top."""
    tops = []
    for i, b in enumerate(positions):
        if not 0 <= b <= _CHAIN_TOP:
            raise ValueError(f"chain position must be in [0, {_CHAIN_TOP}], got {b}")
        tops.append(hash_chain(sig[i * _N:(i + 1) * _N], _CHAIN_TOP - b))
    return b"".join(tops)


# ── Message Encoding ───────────────────────────────────────────────

def checksummed_message_hash(message):
    """Return H(m) || C as the 34 chain positions to sign.

    C is a 2-byte little-endian checksum: the total distance from each
    message-hash byte to the chain top, sum(255 - b). Lowering any hash
    byte raises the checksum, so a forger who only holds the chain values
    revealed by one signature would need preimages for the checksum chains.
    The sum is at most 32 * 255 = 8160 and always fits in 16 bits.
    """
    digest = _hash(message)
    cksum = sum(_CHAIN_TOP - b for b in digest)
    return digest + cksum.to_bytes(_LEN2, "little")


# ── Top-Level API ──────────────────────────────────────────────────

def public_key_from_secret(sk):
    """Recompute the 32-byte public key fingerprint of a secret key.

    Chain seeds are hashed in place to their tops, then fingerprinted.
    """
    y = _chain_seeds(sk)
    mlock(y)
    try:
        for off in range(0, _KEY_MATERIAL_SIZE, _N):
            y[off:off + _N] = hash_chain(y[off:off + _N], _CHAIN_TOP)
        return _hash(y)
    finally:
        munlock(y)
        secure_zero(y)


def generate_key(rand=os.urandom):
    """Generate a Winternitz key pair from 32 bytes of entropy.

    Args:
        rand: Entropy source. Either a callable ``rand(n) -> bytes`` (such
              as ``os.urandom`` or ``secrets.token_bytes``) or an object with
              a ``read(n)`` method (an open binary file, a ChaCha20PRNG).
              Exactly one read of 32 bytes is made.

    Returns:
        (pk_bytes, sk_bytes) tuple.
        pk_bytes: 32-byte public key fingerprint.
        sk_bytes: 32-byte secret key. Sign at most ONE message with it.

    Raises:
        EntropySourceError: If the source fails or returns short data.
    """
    read = getattr(rand, "read", rand)
    try:
        sk = read(WOTS_SK_SIZE)
    except Exception as exc:
        raise EntropySourceError(
            f"entropy source failed to supply {WOTS_SK_SIZE} bytes: {exc}"
        ) from exc
    if sk is None or len(sk) != WOTS_SK_SIZE:
        got = 0 if sk is None else len(sk)
        raise EntropySourceError(
            f"entropy source returned {got} bytes, need {WOTS_SK_SIZE}"
        )
    sk = bytes(sk)

    pk = public_key_from_secret(sk)
    logger.debug("generated Winternitz key pair pk=%s...", pk[:8].hex())
    return pk, sk


def sign(sk, message):
    """Sign ``message`` with a one-time secret key.

    Element i of the signature is chain seed i hashed exactly
    ``checksummed_message_hash(message)[i]`` times.

    PRECONDITION: ``sk`` has never signed a different message. This is not
    checked. Reusing a key for a second message breaks the scheme.

    Args:
        sk: 32-byte secret key from generate_key.
        message: Arbitrary-length message bytes (may be empty).

    Returns:
        1,088-byte signature.
    """
    positions = checksummed_message_hash(message)

    y = _chain_seeds(sk)
    mlock(y)
    try:
        for i, b in enumerate(positions):
            off = i * _N
            y[off:off + _N] = hash_chain(y[off:off + _N], b)
        return bytes(y)
    finally:
        munlock(y)
        secure_zero(y)


def public_key_from_signature(message, sig):
    """Recover the public key fingerprint a signature commits to.

    Completes every chain to its top and hashes the result. For a valid
    signature this equals the signer's public key.
    """
    if len(sig) != WOTS_SIG_SIZE:
        raise ValueError(f"signature must be {WOTS_SIG_SIZE} bytes, got {len(sig)}")
    return _hash(_chain_tops(sig, checksummed_message_hash(message)))


def verify(pk, message, sig):
    """Verify a Winternitz signature.

    The public key is public, so a plain comparison is used.

    Args:
        pk: 32-byte public key from generate_key.
        message: Original message bytes.
        sig: 1,088-byte signature from sign.

    Returns:
        True if valid, False otherwise (including wrong-size inputs).
    """
    if len(pk) != WOTS_PK_SIZE:
        logger.debug("verify: public key is %d bytes, want %d", len(pk), WOTS_PK_SIZE)
        return False
    if len(sig) != WOTS_SIG_SIZE:
        logger.debug("verify: signature is %d bytes, want %d", len(sig), WOTS_SIG_SIZE)
        return False

    ok = public_key_from_signature(message, sig) == bytes(pk)
    if not ok:
        logger.debug("verify: recovered fingerprint does not match public key")
    return ok
