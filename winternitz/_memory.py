# Copyright (c) 2026 Signer — MIT License

"""Secure memory utilities for transient chain-seed material (libsodium-backed).

    secure_zero:  Compiler-resistant wiping via sodium_memzero.
    mlock:        Locks pages to prevent swapping secrets to disk.
    munlock:      Unlocks and zeros the pages on release.

Only mutable buffers (bytearray / memoryview) can be wiped. Immutable
``bytes`` objects are left alone: Python gives no way to clear them.
"""

from nacl._sodium import ffi as _ffi, lib as _lib


def _is_mutable(buf):
    return isinstance(buf, (bytearray, memoryview)) and len(buf) > 0


def secure_zero(buf):
    """Securely wipe a mutable buffer (bytearray / memoryview)."""
    if not _is_mutable(buf):
        return
    _lib.sodium_memzero(_ffi.from_buffer(buf), len(buf))


def mlock(buf):
    """Lock memory pages to prevent swapping to disk.

    Best effort: RLIMIT_MEMLOCK may refuse the lock, in which case the
    buffer is still usable and still gets wiped by munlock/secure_zero.
    """
    if _is_mutable(buf):
        _lib.sodium_mlock(_ffi.from_buffer(buf), len(buf))


def munlock(buf):
    """Unlock memory pages (also zeros the region)."""
    if _is_mutable(buf):
        _lib.sodium_munlock(_ffi.from_buffer(buf), len(buf))
