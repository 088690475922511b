"""Scoped secret buffers.

Root seeds and scheme seeds live in ``bytearray`` objects so they can be
overwritten in place once they are no longer needed. They are handed to
hashlib and dilithium-py as they are, never copied into ``bytes``.

Immutable ``bytes`` produced by third-party libraries cannot be wiped: the
SHAKE digest, ``Mnemonic.to_seed`` output and the expanded signing key from
dilithium-py. Each is dropped as soon as it has been consumed.
"""
from contextlib import contextmanager


def wipe(buf: bytearray) -> None:
    """Overwrite ``buf`` with zeros in place."""
    for i in range(len(buf)):
        buf[i] = 0


@contextmanager
def scoped_secret(data):
    """Yield ``data`` as a bytearray that is zeroed when the block exits.

    A bytearray is used in place; anything else is copied first.
    """
    buf = data if isinstance(data, bytearray) else bytearray(data)
    try:
        yield buf
    finally:
        wipe(buf)
