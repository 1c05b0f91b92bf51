#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Random source for private keys and signature nonces.

The raw source is any callable with the secrets.randbits signature;
draws are taken over the byte-width of the upper bound
and rejected when out of range, so the result is uniform
(rejection sampling, no modulo bias).
"""

import secrets

from digisig.alias import RandBits
from digisig.exceptions import DigisigEntropyError, DigisigValueError


def randbelow(n: int, randbits: RandBits = secrets.randbits) -> int:
    """Return a uniform random integer in [0, n-1]."""

    if n < 1:
        raise DigisigValueError(f"invalid upper bound: {n}")

    # byte-width of n, as in the fixed-width encoding of scalars
    nbits = (n.bit_length() + 7) // 8 * 8
    while True:
        try:
            i = randbits(nbits)
        except (OSError, NotImplementedError) as e:
            raise DigisigEntropyError("random source failure") from e
        if 0 <= i < n:
            return i
