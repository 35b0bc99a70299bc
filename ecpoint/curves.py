#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Standard elliptic curves.

SEC 2 v.2 curves
http://www.secg.org/sec2-v2.pdf

Only the field prime and the curve coefficients are included:
generator and order are not needed for point compression.
The selection covers the different square root paths:

* secp256k1, secp256r1: p = 3 (mod 4), direct formula
* secp224k1: p = 5 (mod 8), Tonelli-Shanks with s = 2
* secp224r1: p = 1 (mod 8), Tonelli-Shanks with s = 96
"""

from typing import Dict

from ecpoint.curve import Curve

secp224k1 = Curve(
    2**224 - 2**32 - 2**12 - 2**11 - 2**9 - 2**7 - 2**4 - 2 - 1,
    0,
    5,
)

secp224r1 = Curve(
    2**224 - 2**96 + 1,
    "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFFFFFFFFFE",
    "0xB4050A850C04B3ABF54132565044B0B7D7BFD8BA270B39432355FFB4",
)

# bitcoin curve
secp256k1 = Curve(2**256 - 2**32 - 977, 0, 7)

secp256r1 = Curve(
    2**256 - 2**224 + 2**192 + 2**96 - 1,
    "0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC",
    "0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B",
)

CURVES: Dict[str, Curve] = {
    "secp224k1": secp224k1,
    "secp224r1": secp224r1,
    "secp256k1": secp256k1,
    "secp256r1": secp256r1,
}
