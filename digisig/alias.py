#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "41aa28d2f1ab148280cd9ed56feda41974053554a42767b83ad043fd39dc0493"
#
# use digisig.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for messages, digests, and
# the fixed-width r||s serialization of dsa.Sig
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor: a zero-argument callable
# returning a fresh hashlib-like object (update, digest, digest_size),
# e.g. hashlib.sha256 or digisig.hashes.streebog256
HashF = Callable[[], Any]

# Raw random source: given k, return a uniform integer in [0, 2^k),
# e.g. secrets.randbits
RandBits = Callable[[int], int]

# Elliptic curve point in affine coordinates.
Point = Tuple[int, int]

# The null point (point at infinity) is INF = (0, 0).
# It is the additive identity of the group law;
# (0, 0) is not a curve point as long as b != 0.
INF = 0, 0
