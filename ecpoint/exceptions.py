#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecpoint from those raised by other codebase.

Expected outcomes (e.g. an x-coordinate without a square root,
or the infinity point having no compressed form) are not errors:
they are signalled by returning None.
Exceptions are raised for caller errors only.
"""


class EcPointValueError(ValueError):
    pass


class EcPointTypeError(TypeError):
    pass
