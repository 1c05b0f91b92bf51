#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve digital signature according to GOST R 34.10-2012.

See also RFC 7091:

https://tools.ietf.org/html/rfc7091

The signature is the pair (r, s) serialized as r||s,
each scalar as a big-endian, zero-padded,
fixed-width byte string as long as the digest.
There is no framing, version byte, or algorithm identifier.

Both the functional API (gen_keys, sign, verify)
and the Signer/Validator object API are provided.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import InitVar, dataclass
from typing import Optional, Sequence, Tuple, Union

from digisig.alias import INF, HashF, Integer, Octets, Point, RandBits
from digisig.ecc.curve import Curve, cryptopro_a
from digisig.ecc.curve_group import double_mult, mult
from digisig.ecc.number_theory import mod_inv
from digisig.entropy import randbelow
from digisig.exceptions import DigisigRuntimeError, DigisigTypeError, DigisigValueError
from digisig.hashes import digest_size, reduce_to_hlen, streebog256
from digisig.utils import bytes_from_octets, hex_string, int_from_integer

logger = logging.getLogger(__name__)


def _byte_len(i: int) -> int:
    return (i.bit_length() + 7) // 8


def _sig_size(ec: Curve, hf: HashF) -> int:
    "Return the r and s serialization size, i.e. the digest size."
    size = digest_size(hf)
    # r and s are reduced mod q: they must always fit
    if ec.q_size > size:
        err_msg = f"curve order too large for the digest: {ec.q_size} bytes"
        err_msg += f" instead of at most {size}"
        raise DigisigValueError(err_msg)
    return size


def int_from_prv_key(prv_key: Integer, ec: Curve = cryptopro_a) -> int:
    """Return a verified private key integer in [1, q-1]."""
    d = int_from_integer(prv_key)
    if not 0 < d < ec.q:
        err_msg = "private key not in 1..q-1: "
        err_msg += f"'{hex_string(d)}'" if d > 0xFFFFFFFF else f"{d}"
        raise DigisigValueError(err_msg)
    return d


@dataclass(frozen=True)
class Sig:
    """GOST R 34.10 signature with fixed-width r||s serialization.

    Format:
    [r][s]

    * r: big-endian r value, zero-padded to the digest size
    * s: big-endian s value, zero-padded to the digest size

    With a 256-bit digest the signature is 64 bytes,
    r and s being 32 bytes integers each.
    """

    # scalar, 0 < r < ec.q
    r: int
    # scalar, 0 < s < ec.q
    s: int
    ec: Curve = cryptopro_a
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, q-1]
        if not 0 < self.r < self.ec.q:
            err_msg = "scalar r not in 1..q-1: "
            err_msg += f"'{hex_string(self.r)}'" if self.r > 0xFFFFFFFF else f"{self.r}"
            raise DigisigValueError(err_msg)

        # s is a scalar, fail if s is not in [1, q-1]
        if not 0 < self.s < self.ec.q:
            err_msg = "scalar s not in 1..q-1: "
            err_msg += f"'{hex_string(self.s)}'" if self.s > 0xFFFFFFFF else f"{self.s}"
            raise DigisigValueError(err_msg)

    def serialize(self, size: int, check_validity: bool = True) -> bytes:
        """Serialize the signature as r||s, size bytes each."""
        if check_validity:
            self.assert_valid()

        if _byte_len(self.r) > size or _byte_len(self.s) > size:
            raise DigisigValueError(f"scalar does not fit in {size} bytes")
        return self.r.to_bytes(size, "big") + self.s.to_bytes(size, "big")

    @classmethod
    def parse(
        cls,
        data: Octets,
        size: int,
        ec: Curve = cryptopro_a,
        check_validity: bool = True,
    ) -> Sig:
        """Return a Sig by splitting r||s at the size bytes midpoint."""
        data = bytes_from_octets(data, 2 * size)
        r = int.from_bytes(data[:size], byteorder="big", signed=False)
        s = int.from_bytes(data[size:], byteorder="big", signed=False)
        return cls(r, s, ec, check_validity)


def gen_keys(
    prv_key: Optional[Integer] = None,
    ec: Curve = cryptopro_a,
    randbits: RandBits = secrets.randbits,
) -> Tuple[int, Point]:
    """Return a private/public (int, Point) key-pair."""
    if prv_key is None:
        # d in the range [1, ec.q-1]
        d = 1 + randbelow(ec.q - 1, randbits)
    else:
        d = int_from_prv_key(prv_key, ec)

    Q = mult(d, ec.G, ec)
    return d, Q


def challenge_(msg_hash: Octets, ec: Curve = cryptopro_a) -> int:
    """Return e, the digest as a scalar in [1, q-1].

    The big-endian digest integer is reduced mod q;
    zero is replaced by one.
    """
    msg_hash = bytes_from_octets(msg_hash)
    e = int.from_bytes(msg_hash, byteorder="big", signed=False) % ec.q
    # e multiplies the nonce: it must not be zero
    if e == 0:
        e = 1
    return e


def _sign_(e: int, d: int, k: int, ec: Curve, size: int) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge e (for low-cardinality curves).
    # It assumes that e, d, and k are in [1, q-1]
    C = mult(k, ec.G, ec)

    r = C[0] % ec.q
    if r == 0:  # r≠0 required as it multiplies the private key
        raise DigisigRuntimeError("failed to sign: r = 0")
    if _byte_len(r) > size:
        raise DigisigRuntimeError(f"failed to sign: r larger than {size} bytes")

    s = (r * d + k * e) % ec.q
    if s == 0:  # s≠0 required for the signature to be valid
        raise DigisigRuntimeError("failed to sign: s = 0")
    if _byte_len(s) > size:
        raise DigisigRuntimeError(f"failed to sign: s larger than {size} bytes")

    return Sig(r, s, ec)


def sign_(
    msg_hash: Octets,
    prv_key: Integer,
    nonce: Optional[Integer] = None,
    ec: Curve = cryptopro_a,
    hf: HashF = streebog256,
    randbits: RandBits = secrets.randbits,
) -> Sig:
    """Sign a digest-size message hash.

    If the nonce is not provided, it is drawn from the random source
    and redrawn until a valid signature is obtained;
    a provided nonce gets a single attempt.
    """
    size = _sig_size(ec, hf)
    msg_hash = bytes_from_octets(msg_hash, size)

    d = int_from_prv_key(prv_key, ec)
    e = challenge_(msg_hash, ec)

    if nonce is not None:
        k = int_from_prv_key(nonce, ec)
        return _sign_(e, d, k, ec, size)

    while True:
        # DigisigEntropyError is fatal: not caught here
        k = randbelow(ec.q, randbits)
        if k == 0:
            logger.debug("zero nonce, drawing again")
            continue
        try:
            return _sign_(e, d, k, ec, size)
        except DigisigRuntimeError as err:
            logger.debug("nonce rejected (%s), drawing again", err)


def sign(
    msg: Octets,
    prv_key: Integer,
    nonce: Optional[Integer] = None,
    ec: Curve = cryptopro_a,
    hf: HashF = streebog256,
    randbits: RandBits = secrets.randbits,
) -> Sig:
    """GOST R 34.10 signature.

    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    interpreted as a big-endian integer and reduced mod q
    to obtain the challenge e.
    Then, for a random nonce k in [1, q-1]:

        C = k*G
        r = x_C mod q
        s = (r*d + k*e) mod q

    with a new nonce being drawn whenever r or s is zero.
    """
    msg_hash = reduce_to_hlen(msg, hf)
    return sign_(msg_hash, prv_key, nonce, ec, hf, randbits)


def _assert_as_valid_(e: int, Q: Point, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes

    v = mod_inv(e, ec.q)
    z1 = s * v % ec.q
    z2 = -r * v % ec.q
    # C = z1*G + z2*Q
    C = double_mult(z1, ec.G, z2, Q, ec)

    # INF has x = 0, i.e. it always fails as r is not zero
    if r != C[0] % ec.q:
        raise DigisigRuntimeError("signature verification failed")


def _point_from_key(key: Sequence[int], ec: Curve) -> Point:
    if len(key) != 2:
        raise DigisigTypeError("not a point")
    Q = key[0], key[1]
    if Q == INF:
        raise DigisigValueError("not a valid public key: INF")
    ec.require_on_curve(Q)
    return Q


def assert_as_valid_(
    msg_hash: Octets,
    key: Point,
    sig: Union[Sig, Octets],
    ec: Curve = cryptopro_a,
    hf: HashF = streebog256,
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False
    if isinstance(sig, Sig):
        # the curve is the caller's, never the one carried by sig
        if sig.ec != ec:
            raise DigisigValueError("signature curve mismatch")
        sig.assert_valid()
    else:
        sig = Sig.parse(sig, _sig_size(ec, hf), ec)

    msg_hash = bytes_from_octets(msg_hash, digest_size(hf))
    e = challenge_(msg_hash, ec)
    Q = _point_from_key(key, ec)
    # second part delegated to helper function
    _assert_as_valid_(e, Q, sig.r, sig.s, ec)


def assert_as_valid(
    msg: Octets,
    key: Point,
    sig: Union[Sig, Octets],
    ec: Curve = cryptopro_a,
    hf: HashF = streebog256,
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False
    msg_hash = reduce_to_hlen(msg, hf)
    assert_as_valid_(msg_hash, key, sig, ec, hf)


def verify_(
    msg_hash: Octets,
    key: Point,
    sig: Union[Sig, Octets],
    ec: Curve = cryptopro_a,
    hf: HashF = streebog256,
) -> bool:
    """GOST R 34.10 signature verification of a message hash."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, key, sig, ec, hf)
    except Exception as err:  # pylint: disable=broad-except
        logger.debug("invalid signature: %s", err)
        return False

    return True


def verify(
    msg: Octets,
    key: Point,
    sig: Union[Sig, Octets],
    ec: Curve = cryptopro_a,
    hf: HashF = streebog256,
) -> bool:
    """GOST R 34.10 signature verification.

    A malformed signature and a wrong one are not told apart:
    both just return False.
    """
    # reduce_to_hlen is inside the try too: verify never raises
    try:
        msg_hash = reduce_to_hlen(msg, hf)
    except Exception as err:  # pylint: disable=broad-except
        logger.debug("invalid message: %s", err)
        return False
    return verify_(msg_hash, key, sig, ec, hf)


class Signer:
    """Signing side of the scheme: it owns the private key.

    No state is kept across sign calls:
    the digest constructor provides a fresh hash object each time,
    so one Signer can be used from several threads.
    """

    def __init__(
        self,
        prv_key: Integer,
        ec: Curve = cryptopro_a,
        hf: HashF = streebog256,
        randbits: RandBits = secrets.randbits,
    ) -> None:
        self.ec = ec
        self.hf = hf
        self.randbits = randbits
        self.size = _sig_size(ec, hf)
        self._prv_key = int_from_prv_key(prv_key, ec)

    def __repr__(self) -> str:
        return f"Signer(ec={self.ec!r})"

    def generate_key(self) -> Point:
        """Return the public key d*G.

        The public key should be provided to the Validator.
        """
        return mult(self._prv_key, self.ec.G, self.ec)

    def sign(self, msg: Octets) -> bytes:
        """Return the r||s signature of msg (without the message)."""
        sig = sign(msg, self._prv_key, None, self.ec, self.hf, self.randbits)
        return sig.serialize(self.size)


class Validator:
    "Validating side of the scheme: it owns the public key."

    def __init__(
        self, pub_key: Point, ec: Curve = cryptopro_a, hf: HashF = streebog256
    ) -> None:
        self.ec = ec
        self.hf = hf
        self.size = _sig_size(ec, hf)
        self.pub_key = _point_from_key(pub_key, ec)

    def __repr__(self) -> str:
        return f"Validator({self.pub_key!r}, ec={self.ec!r})"

    def validate(self, msg: Octets, signature: Octets) -> bool:
        """Return True if signature is a valid r||s signature of msg.

        Only the serialized r||s form is accepted:
        Sig objects are rejected.
        """
        if not isinstance(signature, (bytes, str)):
            logger.debug("invalid signature type: %s", type(signature).__name__)
            return False
        return verify(msg, self.pub_key, signature, self.ec, self.hf)
