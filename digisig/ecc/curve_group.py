#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Point arithmetic over Fp in affine coordinates.
For the prime order subgroup class Curve,
see the digisig.ecc.curve module.
"""

from math import ceil

from digisig.alias import INF, Integer, Point
from digisig.ecc.number_theory import mod_inv
from digisig.exceptions import DigisigTypeError, DigisigValueError
from digisig.utils import hex_string, int_from_integer

HEX_THRESHOLD = 0xFFFFFFFF


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with the null point INF.

    The group law does not depend on b: it is never needed
    as long as the operands are points on the curve.
    No check is performed on p and a.
    """

    def __init__(self, p: Integer, a: Integer) -> None:
        p = int_from_integer(p)
        a = int_from_integer(a)

        if p < 3:
            raise DigisigValueError(f"invalid p: {p}")
        self.p = p
        # byte-length
        self.p_size = ceil(p.bit_length() / 8)
        # negative a (e.g. -3) is fine: normalize it into [0, p-1]
        self._a = a % p

    @property
    def a(self) -> int:
        return self._a

    def __str__(self) -> str:
        result = "CurveGroup"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
        else:
            result += f"\n a   = {self._a}"

        return result

    def __repr__(self) -> str:
        result = "CurveGroup("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self._a > HEX_THRESHOLD:
            result += f", '{hex_string(self._a)}'"
        else:
            result += f", {self._a}"
        result += ")"
        return result

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if len(Q) != 2:
            raise DigisigTypeError("not a point")
        if Q == INF:
            return INF
        return Q[0], (self.p - Q[1]) % self.p

    def double(self, Q: Point) -> Point:
        """Return 2*Q.

        The input point is assumed to be on curve.
        """

        if Q == INF:
            return INF
        # vertical tangent: Q is a point of order two
        if Q[1] == 0:
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = (lam * lam - 2 * Q[0]) % self.p
        y = (lam * (Q[0] - x) - Q[1]) % self.p
        return x, y

    def add(self, Q: Point, R: Point) -> Point:
        """Return the sum of two points.

        The input points are assumed to be on curve.
        """

        if R == INF:
            return Q
        if Q == INF:
            return R

        if R[0] == Q[0]:
            # opposite points, also when Q is a point of order two
            if R == self.negate(Q):
                return INF
            return self.double(Q)

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = (lam * lam - Q[0] - R[0]) % self.p
        y = (lam * (Q[0] - x) - Q[1]) % self.p
        return x, y


def mult(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.
    The number of doublings only depends on the bit-length of m.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise DigisigValueError(f"negative m: {hex(m)}")

    R = INF
    for i in reversed(range(m.bit_length())):
        # the doubling part of 'double & add'
        R = ec.double(R)
        if (m >> i) & 1:
            R = ec.add(R, Q)
    return R


def double_mult(u: int, H: Point, v: int, Q: Point, ec: CurveGroup) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    The two products are computed independently and then summed.

    The input points are assumed to be on curve,
    the u and v coefficients are assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if u < 0:
        raise DigisigValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise DigisigValueError(f"negative second coefficient: {hex(v)}")

    return ec.add(mult(u, H, ec), mult(v, Q, ec))
