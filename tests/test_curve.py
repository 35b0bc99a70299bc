#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecpoint.curve` module."

import dataclasses
from typing import Dict, Set, Tuple

import pytest

from ecpoint.alias import INF
from ecpoint.curve import Curve
from ecpoint.exceptions import EcPointTypeError, EcPointValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 7 % 4 = 3
low_card_curves["ec7_3_4"] = Curve(7, 3, 4)
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6)
low_card_curves["ec13_19"] = Curve(13, 0, 2)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8)
low_card_curves["ec17_23"] = Curve(17, 3, 5)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2)
low_card_curves["ec19_23"] = Curve(19, 2, 9)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7)
low_card_curves["ec23_31"] = Curve(23, 5, 1)

ec7 = low_card_curves["ec7_3_4"]


def affine_points(ec: Curve) -> Set[Tuple[int, int]]:
    "Return all the affine points of the curve by brute force."
    points = set()
    for x in range(ec.p):
        y2 = (x * x * x + ec.a * x + ec.b) % ec.p
        for y in range(ec.p):
            if y * y % ec.p == y2:
                points.add((x, y))
    return points


def test_toy_curve() -> None:
    # 5^2 = 25 = 4 (mod 7) and 2^3 + 3*2 + 4 = 18 = 4 (mod 7)
    Q = (2, 5)
    assert ec7.is_on_curve(Q)
    ec7.require_on_curve(Q)

    assert ec7.compress(Q) == (2, True)
    assert ec7.decompress(2, True) == (2, 5)
    # the other root: 7 - 5 = 2
    assert ec7.decompress(2, False) == (2, 2)

    # y = 0 is a legitimate affine coordinate, distinct from INF
    assert ec7.is_on_curve((6, 0))
    assert ec7.compress((6, 0)) == (6, False)
    assert ec7.decompress(6, False) == (6, 0)


def test_is_on_curve() -> None:
    for ec in low_card_curves.values():
        points = affine_points(ec)
        assert ec.is_on_curve(INF)
        for x in range(ec.p):
            for y in range(ec.p):
                assert ec.is_on_curve((x, y)) == ((x, y) in points)


def test_require_on_curve() -> None:
    ec7.require_on_curve(INF)
    with pytest.raises(EcPointValueError, match="point not on curve"):
        ec7.require_on_curve((2, 4))


def test_is_on_curve_exceptions() -> None:
    with pytest.raises(EcPointValueError, match="point must be a tuple"):
        ec7.is_on_curve((2, 5, 1))
    with pytest.raises(EcPointValueError, match="point must be a tuple"):
        ec7.is_on_curve((2,))
    with pytest.raises(EcPointValueError, match="x-coordinate not in 0..p-1: "):
        ec7.is_on_curve((7, 5))
    with pytest.raises(EcPointValueError, match="x-coordinate not in 0..p-1: "):
        ec7.is_on_curve((-1, 5))
    with pytest.raises(EcPointValueError, match="y-coordinate not in 0..p-1: "):
        ec7.is_on_curve((2, 12))


def test_compress() -> None:
    assert ec7.compress(INF) is None
    # pure projection: the point is not checked to be on the curve
    assert ec7.compress((1, 4)) == (1, False)
    assert ec7.compress((1, 3)) == (1, True)

    for Q in ((2,), (2, 5, 1)):
        with pytest.raises(EcPointValueError, match="point must be a tuple"):
            ec7.compress(Q)


def test_decompress() -> None:
    for ec in low_card_curves.values():
        points = affine_points(ec)
        xs = {Q[0] for Q in points}
        for x in range(ec.p):
            for odd in (True, False):
                Q = ec.decompress(x, odd)
                if x not in xs:
                    assert Q is None
                    continue
                assert Q is not None
                assert Q in points
                assert ec.is_on_curve(Q)
                assert Q[0] == x
                if Q[1] != 0:
                    assert (Q[1] % 2 == 1) == odd


def test_round_trip() -> None:
    for ec in low_card_curves.values():
        for Q in affine_points(ec):
            compressed = ec.compress(Q)
            assert compressed is not None
            assert ec.decompress(*compressed) == Q


def test_decompress_exceptions() -> None:
    with pytest.raises(EcPointValueError, match="x-coordinate not in 0..p-1: "):
        ec7.decompress(7, True)
    with pytest.raises(EcPointValueError, match="x-coordinate not in 0..p-1: "):
        ec7.decompress(-1, False)
    err_msg = "x-coordinate not in 0..p-1: 'FF FFFFFFFF'"
    with pytest.raises(EcPointValueError, match=err_msg):
        ec7.decompress(2**40 - 1, False)


def test_y() -> None:
    assert ec7.y(2) in (2, 5)
    # 1 + 3 + 4 = 1 (mod 7)
    assert ec7.y(1) in (1, 6)
    # 27 + 9 + 4 = 5 (mod 7) is not a quadratic residue
    assert ec7.y(3) is None
    assert ec7.decompress(3, True) is None
    assert ec7.decompress(3, False) is None


def test_p2_curve() -> None:
    ec = Curve(2, 1, 1)
    # y^2 = x^3 + x + 1: (0, 1) and (1, 1)
    assert ec.is_on_curve((0, 1))
    assert ec.is_on_curve((1, 1))
    assert not ec.is_on_curve((0, 0))
    assert ec.decompress(0, True) == (0, 1)
    assert ec.decompress(1, True) == (1, 1)


def test_integer_parameters() -> None:
    assert Curve("0x07", "03", b"\x04") == ec7
    assert Curve(7, 3, 4) == ec7
    assert len({Curve(7, 3, 4), ec7}) == 1
    assert Curve(7, 3, 5) != ec7

    with pytest.raises(EcPointTypeError, match="not an Integer: "):
        Curve(7.0, 3, 4)  # type: ignore

    with pytest.raises(dataclasses.FrozenInstanceError):
        ec7.p = 11  # type: ignore


def test_str_repr() -> None:
    assert repr(ec7) == "Curve(7, 3, 4)"
    assert str(ec7) == "Curve\n p   = 7\n a   = 3\n b   = 4"

    ec = Curve(2**40 - 87, 2**33, 7)
    assert repr(ec) == "Curve('FF FFFFFFA9', '02 00000000', 7)"
    assert str(ec) == "Curve\n p   = FF FFFFFFA9\n a   = 02 00000000\n b   = 7"


def test_composite_modulus() -> None:
    # 9 is not a prime: 8 passes Euler's criterion,
    # but the Tonelli-Shanks iteration cannot terminate
    ec = Curve(9, 0, 8)
    with pytest.raises(EcPointValueError, match="p is not prime: 9"):
        ec.decompress(0, True)
