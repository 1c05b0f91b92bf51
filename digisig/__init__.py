#!/usr/bin/env python3

# Copyright (C) The digisig developers
#
# This file is part of digisig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of digisig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the digisig package."

name = "digisig"
__version__ = "2026.10.0"
__author__ = "The digisig developers"
__author_email__ = "devs@digisig.org"
__copyright__ = "Copyright (C) 2023-2026 The digisig developers"
__license__ = "MIT License"
