#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve domain parameters.

A Curve is the cyclic subgroup of prime order q
generated by G on the curve y^2 = x^3 + a*x + b over Fp.

Named parameter sets are loaded from the data directory:

* GOST R 34.10-2001/2012 test parameters and
  CryptoPro parameters (RFC 4357)
  https://tools.ietf.org/html/rfc4357
* SEC 2 v.2 secp192r1
  http://www.secg.org/sec2-v2.pdf

The parameter sets are not checked
for cryptographic soundness.
"""

import json
from os import path
from typing import Dict, Sequence

from digisig.alias import INF, Integer, Point
from digisig.ecc.curve_group import HEX_THRESHOLD, CurveGroup
from digisig.exceptions import DigisigValueError
from digisig.utils import hex_string, int_from_integer


class Curve(CurveGroup):
    "Prime order q subgroup of the points of an elliptic curve over Fp."

    def __init__(self, p: Integer, a: Integer, q: Integer, G: Sequence[Integer]) -> None:
        super().__init__(p, a)

        if len(G) != 2:
            raise DigisigValueError("Generator must a be a sequence[int, int]")
        self.G = (int_from_integer(G[0]), int_from_integer(G[1]))
        if self.G == INF:
            raise DigisigValueError("INF point cannot be a generator")
        if not (0 <= self.G[0] < self.p and 0 <= self.G[1] < self.p):
            raise DigisigValueError("Generator coordinates not in 0..p-1")

        q = int_from_integer(q)
        if q < 2:
            raise DigisigValueError(f"invalid q: {q}")
        self.q = q
        self.q_len = q.bit_length()
        # byte-length
        self.q_size = (self.q_len + 7) // 8

        # b is implied by the generator being on the curve
        x, y = self.G
        self._b = (y * y - (x * x + self._a) * x) % self.p

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n x_G = {hex_string(self.G[0])}"
            result += f"\n y_G = {hex_string(self.G[1])}"
            result += f"\n q   = {hex_string(self.q)}"
        else:
            result += f"\n p   = {self.p}"
            result += f"\n a   = {self._a}"
            result += f"\n x_G = {self.G[0]}"
            result += f"\n y_G = {self.G[1]}"
            result += f"\n q   = {self.q}"
        return result

    def __repr__(self) -> str:
        if self.p > HEX_THRESHOLD:
            result = f"Curve('{hex_string(self.p)}', '{hex_string(self._a)}'"
            result += f", '{hex_string(self.q)}'"
            result += f", ('{hex_string(self.G[0])}', '{hex_string(self.G[1])}'))"
        else:
            result = f"Curve({self.p}, {self._a}, {self.q}, ({self.G[0]}, {self.G[1]}))"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return (self.p, self._a, self.q, self.G) == (other.p, other._a, other.q, other.G)

    def __hash__(self) -> int:
        return hash((self.p, self._a, self.q, self.G))

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise DigisigValueError("point must be a tuple[int, int]")
        if Q == INF:
            return True
        if not (0 <= Q[0] < self.p and 0 <= Q[1] < self.p):
            return False
        y2 = ((Q[0] * Q[0] + self._a) * Q[0] + self._b) % self.p
        return y2 == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise DigisigValueError("point not on curve")


datadir = path.join(path.dirname(__file__), "data")
filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    curves_params = json.load(file_)

CURVES: Dict[str, Curve] = {
    ec_name: Curve(*ec_params) for ec_name, ec_params in curves_params.items()
}

gost_test = CURVES["id-GostR3410-2001-TestParamSet"]
cryptopro_a = CURVES["id-GostR3410-2001-CryptoPro-A-ParamSet"]
