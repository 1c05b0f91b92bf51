#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module digisig.ecc."""

from digisig.ecc.curve import CURVES, Curve, cryptopro_a, gost_test
from digisig.ecc.curve_group import CurveGroup, double_mult, mult
from digisig.ecc.dsa import Sig, Signer, Validator

__all__ = [
    "CURVES",
    "Curve",
    "CurveGroup",
    "Sig",
    "Signer",
    "Validator",
    "cryptopro_a",
    "double_mult",
    "gost_test",
    "mult",
]
