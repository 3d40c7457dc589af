# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Equation of state models and state algebra for compressible flow solvers
"""

from .config import MaterialModelData
from .exceptions import (
    EOSError,
    InvalidMaterial,
    NonPhysicalState,
    UndefinedRelation,
)
from .euler.eos import EOS, EOSType, PerfectGas, StiffenedGas
from .euler.jwl import JWL
from .euler.material import make_eos
from .euler.mie_gruneisen import MieGruneisen
from .euler.state import ConsState, EulerState, PrimState

__all__ = [
    "ConsState",
    "EOS",
    "EOSError",
    "EOSType",
    "EulerState",
    "InvalidMaterial",
    "JWL",
    "MaterialModelData",
    "MieGruneisen",
    "NonPhysicalState",
    "PerfectGas",
    "PrimState",
    "StiffenedGas",
    "UndefinedRelation",
    "make_eos",
]
