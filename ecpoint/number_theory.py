#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic over prime fields.

Parity test, Legendre symbol (Euler's criterion),
and modular square root (Tonelli-Shanks algorithm), see
https://en.wikipedia.org/wiki/Tonelli%E2%80%93Shanks_algorithm

All functions are pure and operate on python int,
so there is no precision limit on field elements.
The modulus p must be a prime: this is not checked
(a primality test would cost more than the functions themselves)
and results are meaningless for composite moduli.
"""

from enum import IntEnum
from typing import Optional

from ecpoint.exceptions import EcPointValueError
from ecpoint.utils import int_string


class LegendreSymbol(IntEnum):
    "The Legendre symbol a|p of a field element a."

    ZERO = 0
    RESIDUE = 1
    NON_RESIDUE = -1


def is_odd(a: int) -> bool:
    return a & 1 == 1


def legendre_symbol(a: int, p: int) -> LegendreSymbol:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is a prime. The result is ZERO if p divides a,
    RESIDUE if a is a non-zero square modulo p,
    NON_RESIDUE otherwise.

    a^((p-1)/2) mod p is always 0, 1, or p-1 for a prime p;
    any value but 0 and 1 is taken as NON_RESIDUE.
    """

    if p < 2 or p != 2 and p % 2 == 0:
        raise EcPointValueError(f"p is not an odd prime: {int_string(p)}")

    a %= p
    if a == 0:
        return LegendreSymbol.ZERO
    # 1 is the only non-zero element of F2, and it is a square
    if p == 2:
        return LegendreSymbol.RESIDUE

    ls = pow(a, p >> 1, p)
    if ls == 0:
        return LegendreSymbol.ZERO
    if ls == 1:
        return LegendreSymbol.RESIDUE
    return LegendreSymbol.NON_RESIDUE


def modular_sqrt(a: int, p: int) -> Optional[int]:
    """Return a square root of a (mod p), None if there is none.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    p must be a prime. If p = 3 (mod 4) the root is computed
    directly as a^((p+1)/4); otherwise the Tonelli-Shanks iteration
    is used. A non-residue a has no root:
    this is an expected outcome, so None is returned
    instead of raising an exception.

    p is not tested for primality. A composite p either gives
    a meaningless result or, when the Tonelli-Shanks iteration
    cannot terminate, raises EcPointValueError.
    """

    a %= p
    if p == 2:
        return a

    ls = legendre_symbol(a, p)
    if ls == LegendreSymbol.ZERO:
        return 0
    if ls == LegendreSymbol.NON_RESIDUE:
        return None

    # Factor p-1 on the form q * 2^s (with q odd)
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:  # p = 3 (mod 4), e.g. secp256k1
        return pow(a, (p + 1) // 4, p)

    # Select a z which is a quadratic non residue modulo p
    z = 1
    while legendre_symbol(z, p) != LegendreSymbol.NON_RESIDUE:
        z += 1
        if z == p:
            raise EcPointValueError(f"p is not prime: {int_string(p)}")

    m = s
    c = pow(z, q, p)
    t = pow(a, q, p)
    r = pow(a, (q + 1) // 2, p)
    while t != 1:
        # Find the lowest i, 0 < i < m, such that t^(2^i) = 1
        t2i = t
        for i in range(1, m):
            t2i = t2i * t2i % p
            if t2i == 1:
                break
        else:
            # the order of t is not a power of 2 below 2^m
            raise EcPointValueError(f"p is not prime: {int_string(p)}")
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p

    return r
