# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from dataclasses import dataclass

from fluideos.config import EOSType
from fluideos.euler.eos import EOS, PerfectGas, StiffenedGas
from fluideos.euler.jwl import JWL
from fluideos.euler.mie_gruneisen import MieGruneisen


@dataclass
class ThermoState:
    """A reference thermodynamic state of a material"""

    name: str
    eos: EOS
    rho: float
    e: float


thermo_states = [
    ThermoState(name="air", eos=PerfectGas(gamma=1.4), rho=1.2, e=2.1e5),
    ThermoState(
        name="water",
        eos=StiffenedGas(gamma=4.4, p0=6e8),
        rho=1000.0,
        e=7.765e5,
    ),
    ThermoState(name="copper", eos=MieGruneisen(), rho=9000.0, e=1e5),
    ThermoState(name="tnt-products", eos=JWL(), rho=1630.0, e=4e6),
]


@pytest.fixture(params=thermo_states, ids=lambda s: s.name)
def thermo_state(request):
    yield request.param


class NonHyperbolic(EOS):
    """A perfect gas whose pressure derivatives are forced to make the square
    of the sound velocity negative everywhere"""

    type = EOSType.STIFFENED_GAS

    def p(self, rho, e):
        return 0.4 * rho * e

    def e(self, rho, p):
        return p / (0.4 * rho)

    def rho(self, p, e):
        return p / (0.4 * e)

    def dpdrho(self, rho, e):
        return -1.0

    def big_gamma(self, rho, e):
        return 0.0


@pytest.fixture
def non_hyperbolic(verbose):
    yield NonHyperbolic(verbose=verbose)
