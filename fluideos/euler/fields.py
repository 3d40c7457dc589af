# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

from fluideos.fields import Fields


class PrimFields(Fields):
    """Indexing fields for the primitive state variables"""

    rho = 0
    U = 1
    V = 2
    W = 3
    p = 4


class ConsFields(Fields):
    """Indexing fields for the conservative state variables"""

    rho = 0
    rhoU = 1
    rhoV = 2
    rhoW = 3
    rhoE = 4


class EulerFields(Fields):
    """Indexing fields for the full state: the conservative variables
    followed by the auxiliary ones"""

    rho = 0
    rhoU = 1
    rhoV = 2
    rhoW = 3
    rhoE = 4
    rhoe = 5
    U = 6
    V = 7
    W = 8
    p = 9
    c = 10
    e = 11
