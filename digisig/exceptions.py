#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by digisig from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the digisig versions are derived.
"""


class DigisigValueError(ValueError):
    pass


class DigisigTypeError(TypeError):
    pass


class DigisigRuntimeError(RuntimeError):
    pass


class DigisigEntropyError(DigisigRuntimeError):
    "The random source could not provide a value."
