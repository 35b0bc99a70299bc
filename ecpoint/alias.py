#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
# e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
#
# use ecpoint.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates: (x, y)
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, ...]

# The infinity point has no affine coordinates: it is the empty tuple.
# It can be checked with 'not Q' or 'len(Q) == 0'.
# (x, 0) cannot be used, as y=0 is a valid affine coordinate
# on curves of even order, e.g. (6, 0) on y^2 = x^3 + 3x + 4 mod 7
INF: Point = ()

# Compressed point: x-coordinate and y parity (True if y is odd)
CompressedPoint = Tuple[int, bool]
