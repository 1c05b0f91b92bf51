#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

GOST R 34.11-2012 (Streebog) digests are provided by gostcrypto.
Every function here takes a digest constructor, not a digest object:
each call gets its own fresh hashing state,
so concurrent signing and validation never share it.
"""

from __future__ import annotations

from gostcrypto import gosthash

from digisig.alias import HashF, Octets
from digisig.utils import bytes_from_octets


def streebog256(data: bytes = b"") -> gosthash.GOST34112012:
    """Return a new GOST R 34.11-2012 hash object, 256-bit digest."""
    return gosthash.new("streebog256", data=data)


def streebog512(data: bytes = b"") -> gosthash.GOST34112012:
    """Return a new GOST R 34.11-2012 hash object, 512-bit digest."""
    return gosthash.new("streebog512", data=data)


def digest_size(hf: HashF = streebog256) -> int:
    "Return the digest size in bytes of the hf hash function."
    return int(hf().digest_size)


def reduce_to_hlen(msg: Octets, hf: HashF = streebog256) -> bytes:
    msg = bytes_from_octets(msg)
    h = hf()
    h.update(msg)
    return bytes(h.digest())
