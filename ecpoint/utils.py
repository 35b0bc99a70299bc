#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Integer conversion and rendering utilities."""

from ecpoint.alias import Integer
from ecpoint.exceptions import EcPointTypeError, EcPointValueError

# integers above this value are rendered as hex-strings in messages
HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    # bool is an int subclass, but never a meaningful field element
    if isinstance(i, int) and not isinstance(i, bool):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    if isinstance(i, bytes):
        return int.from_bytes(i, "big", signed=False)

    raise EcPointTypeError(f"not an Integer: {i!r}")


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise EcPointValueError(f"negative integer: {int_}")
    hex_digits = f"{int_:X}"
    if len(hex_digits) % 2:
        hex_digits = "0" + hex_digits

    # groups of eight hex-digits, counted from the right
    head = len(hex_digits) % 8
    groups = [hex_digits[:head]] if head else []
    groups += [hex_digits[j : j + 8] for j in range(head, len(hex_digits), 8)]
    return " ".join(groups)


def int_string(i: int) -> str:
    "Return i as decimal, or as quoted hex-string if above HEX_THRESHOLD."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
