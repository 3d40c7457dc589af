# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Consistency of the material relations of every shipped EOS """

import numpy as np
import pytest

from fluideos.config import EOSType, MaterialModelData
from fluideos.euler.eos import PerfectGas, StiffenedGas
from fluideos.euler.jwl import JWL
from fluideos.euler.mie_gruneisen import MieGruneisen
from fluideos.exceptions import InvalidMaterial, NonPhysicalState


def test_energy_inverts_pressure(thermo_state):
    eos, rho, e = thermo_state.eos, thermo_state.rho, thermo_state.e

    p = eos.p(rho, e)

    assert eos.e(rho, p) == pytest.approx(e, rel=1e-10)


def test_density_inverts_pressure(thermo_state):
    eos, rho, e = thermo_state.eos, thermo_state.rho, thermo_state.e

    p = eos.p(rho, e)

    assert eos.rho(p, e) == pytest.approx(rho, rel=1e-8)


def test_dpdrho(thermo_state):
    eos, rho, e = thermo_state.eos, thermo_state.rho, thermo_state.e
    h = 1e-6 * rho

    fd = (eos.p(rho + h, e) - eos.p(rho - h, e)) / (2 * h)

    assert eos.dpdrho(rho, e) == pytest.approx(fd, rel=1e-5)


def test_big_gamma(thermo_state):
    eos, rho, e = thermo_state.eos, thermo_state.rho, thermo_state.e
    h = 1e-6 * e

    fd = (eos.p(rho, e + h) - eos.p(rho, e - h)) / (2 * h) / rho

    assert eos.big_gamma(rho, e) == pytest.approx(fd, rel=1e-6)


def test_hyperbolic_at_reference(thermo_state):
    eos, rho, e = thermo_state.eos, thermo_state.rho, thermo_state.e

    assert eos.sound_velocity_square(rho, e) > 0


def test_vectorized(thermo_state):
    eos = thermo_state.eos
    rho = thermo_state.rho * np.array([0.99, 1.0, 1.01])
    e = thermo_state.e * np.array([1.0, 1.1, 0.9])

    p = eos.p(rho, e)

    assert p.shape == (3,)
    np.testing.assert_allclose(eos.e(rho, p), e, rtol=1e-10)
    np.testing.assert_allclose(eos.rho(p, e), rho, rtol=1e-8)
    assert eos.sound_velocity(rho, e).shape == (3,)


@pytest.mark.parametrize(
    "eos, eos_type",
    [
        (PerfectGas(), EOSType.STIFFENED_GAS),
        (StiffenedGas(), EOSType.STIFFENED_GAS),
        (MieGruneisen(), EOSType.MIE_GRUNEISEN),
        (JWL(), EOSType.JWL),
    ],
)
def test_type(eos, eos_type):
    assert eos.type is eos_type


def test_perfect_gas_sound_velocity():
    eos = PerfectGas(gamma=1.4)
    rho, p = 1.2, 1e5

    c = eos.sound_velocity(rho, eos.e(rho, p))

    assert c == pytest.approx(np.sqrt(1.4 * p / rho))


def test_stiffened_gas_sound_velocity():
    eos = StiffenedGas(gamma=4.4, p0=6e8)
    rho, p = 1000.0, 1e5

    c = eos.sound_velocity(rho, eos.e(rho, p))

    assert c == pytest.approx(np.sqrt(4.4 * (p + 6e8) / rho))


def test_stiffened_gas_reduces_to_perfect_gas():
    perfect = PerfectGas(gamma=1.4)
    stiffened = StiffenedGas(gamma=1.4, p0=0)

    assert stiffened.p(1.2, 2e5) == pytest.approx(perfect.p(1.2, 2e5))
    assert stiffened.e(1.2, 1e5) == pytest.approx(perfect.e(1.2, 1e5))


def test_mie_gruneisen_reference_state():
    eos = MieGruneisen(rho0=8924.0, c0=3910.0, Gamma0=1.96, s=1.51, e0=0)

    assert eos.p(8924.0, 0.0) == pytest.approx(0.0, abs=1e-6)
    assert eos.rho(0.0, 0.0) == pytest.approx(8924.0)
    assert eos.sound_velocity(8924.0, 0.0) == pytest.approx(3910.0)


def test_mie_gruneisen_no_density():
    eos = MieGruneisen(rho0=1.0, c0=1.0, Gamma0=0.5, s=1.0)

    # A strong tension makes the quadratic in eta have no real root
    with pytest.raises(NonPhysicalState):
        eos.rho(-10.0, 0.0)


def test_jwl_big_gamma_is_omega():
    eos = JWL(omega=0.35)

    assert eos.big_gamma(1500.0, 1e6) == pytest.approx(0.35)


def test_jwl_failed_inversion(mocker):
    eos = JWL()
    result = mocker.Mock(converged=False, root=np.nan)
    mocker.patch("fluideos.euler.jwl.root_scalar", return_value=result)

    with pytest.raises(NonPhysicalState, match="density"):
        eos.rho(1e9, 1e6)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: PerfectGas(gamma=1.0),
        lambda: StiffenedGas(gamma=0.5, p0=1e9),
        lambda: MieGruneisen(rho0=-1.0),
        lambda: JWL(omega=0.0),
    ],
)
def test_invalid_constants(factory):
    with pytest.raises(InvalidMaterial):
        factory()


def test_material_kind_mismatch():
    with pytest.raises(InvalidMaterial, match="JWL"):
        PerfectGas(data=MaterialModelData(eos=EOSType.JWL))
