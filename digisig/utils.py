#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Conversions between the accepted input forms.

Messages and signatures are Octets (bytes or hex-string),
keys and curve parameters are Integer (int, hex-string, or bytes).
Malformed input always raises DigisigValueError.
"""

from typing import Optional

from digisig.alias import Integer, Octets
from digisig.exceptions import DigisigValueError


def _bytes_from_hex(hex_str: str) -> bytes:
    try:
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise DigisigValueError(f"invalid hex-string: {e}") from e


def bytes_from_octets(octets: Octets, out_size: Optional[int] = None) -> bytes:
    """Return bytes from bytes or hex-string.

    Spaces in the hex-string are ignored.
    If out_size is given, the result must be exactly out_size bytes.
    """

    if isinstance(octets, str):
        octets = _bytes_from_hex(octets)

    if out_size is not None and len(octets) != out_size:
        err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
        raise DigisigValueError(err_msg)
    return octets


def int_from_integer(i: Integer) -> int:
    """Return an int from an int, a hex-string, or big-endian bytes.

    Hex-strings with the "0x" prefix may be negative (e.g. "-0x03");
    without the prefix they are read as big-endian bytes.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith(("0x", "-0x")):
            try:
                return int(i, 16)
            except ValueError as e:
                raise DigisigValueError(f"invalid hex-string: {e}") from e
        i = _bytes_from_hex(i)

    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the upper-case hex-string of a non-negative integer.

    Digits are grouped by four bytes, most significant group first,
    e.g. "01 DEADBEEF 00000000".
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise DigisigValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:].upper()
    if len(a_str) % 2:
        a_str = "0" + a_str

    groups = []
    while a_str:
        groups.insert(0, a_str[-8:])
        a_str = a_str[:-8]
    return " ".join(groups)
