#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve class: membership test and point compression.

A point is compressed to its x-coordinate and the parity of its
y-coordinate; it is decompressed by computing the square root
of the curve equation right-hand side and picking the root
with the required parity.
"""

from dataclasses import dataclass
from typing import Optional

from ecpoint.alias import CompressedPoint, Integer, Point
from ecpoint.exceptions import EcPointValueError
from ecpoint.number_theory import is_odd, modular_sqrt
from ecpoint.utils import int_from_integer, int_string


@dataclass(frozen=True)
class Curve:
    """Elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.

    Curve parameters are not validated:
    p must be an odd prime (or 2), a and b must be in [0, p-1],
    and 4 a^3 + 27 b^2 ≠ 0 (mod p).
    """

    p: int
    a: int
    b: int

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        object.__setattr__(self, "p", int_from_integer(p))
        object.__setattr__(self, "a", int_from_integer(a))
        object.__setattr__(self, "b", int_from_integer(b))

    def __str__(self) -> str:
        lines = ["Curve"]
        for param in ("p", "a", "b"):
            value = int_string(getattr(self, param)).strip("'")
            lines.append(f" {param}   = {value}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        params = ", ".join(int_string(i) for i in (self.p, self.a, self.b))
        return f"Curve({params})"

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self.a) * x + self.b) % self.p

    def _require_field_element(self, i: int, coordinate: str) -> None:
        if not 0 <= i < self.p:
            err_msg = f"{coordinate}-coordinate not in 0..p-1: {int_string(i)}"
            raise EcPointValueError(err_msg)

    def y(self, x: int) -> Optional[int]:
        """Return a y coordinate from x, as in (x, y).

        Either of the two roots may be returned;
        None is returned if x is not a valid x-coordinate.
        """
        self._require_field_element(x, "x")
        return modular_sqrt(self._y2(x), self.p)

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        The infinity point INF is on every curve.
        """
        if len(Q) == 0:  # infinity point
            return True
        if len(Q) != 2:
            raise EcPointValueError("point must be a tuple[int, int]")
        self._require_field_element(Q[0], "x")
        self._require_field_element(Q[1], "y")
        return self._y2(Q[0]) == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise EcPointValueError("point not on curve")

    def compress(self, Q: Point) -> Optional[CompressedPoint]:
        """Return the (x, y parity) pair of the point.

        The infinity point has no compressed representation: None.
        The input point is not checked to be on the curve.
        """
        if len(Q) == 0:
            return None
        if len(Q) != 2:
            raise EcPointValueError("point must be a tuple[int, int]")
        return Q[0], is_odd(Q[1])

    def decompress(self, x: int, odd: bool) -> Optional[Point]:
        """Return the point with x-coordinate x and y parity odd.

        None is returned if x is not a valid x-coordinate,
        i.e. if x^3 + a*x + b is not a square modulo p.
        """
        root = self.y(x)
        if root is None:
            return None
        # switch even/odd root as needed
        y = root if is_odd(root) == odd else (self.p - root) % self.p
        return x, y
