# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Single-material equations of state for the 3D Euler system """

from .eos import EOS, EOSType, PerfectGas, StiffenedGas
from .jwl import JWL
from .material import make_eos
from .mie_gruneisen import MieGruneisen
from .state import ConsState, EulerState, PrimState
