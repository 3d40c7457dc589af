# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import logging

import pytest

from fluideos.config import EOSType, MaterialModelData
from fluideos.euler import material
from fluideos.euler.eos import EOS, StiffenedGas
from fluideos.euler.jwl import JWL
from fluideos.euler.material import make_eos
from fluideos.euler.mie_gruneisen import MieGruneisen
from fluideos.exceptions import InvalidMaterial


@pytest.mark.parametrize(
    "eos_type, cls",
    [
        (EOSType.STIFFENED_GAS, StiffenedGas),
        (EOSType.MIE_GRUNEISEN, MieGruneisen),
        (EOSType.JWL, JWL),
    ],
)
def test_every_type_is_registered(eos_type, cls):
    eos = make_eos(MaterialModelData(eos=eos_type))

    assert type(eos) is cls
    assert eos.type is eos_type


def test_parameters_and_floors():
    data = MaterialModelData.from_dict(
        {
            "eos": "stiffened_gas",
            "rhomin": 1e-3,
            "pmin": -1e8,
            "parameters": {"gamma": 4.4, "p0": 6e8},
        }
    )

    eos = make_eos(data, verbose=True)

    assert eos.gamma == 4.4
    assert eos.p0 == 6e8
    assert eos.rhomin == 1e-3
    assert eos.pmin == -1e8
    assert eos.verbose
    assert eos.data is data


def test_unknown_parameter():
    data = MaterialModelData(eos=EOSType.JWL, parameters={"gamma": 1.4})

    with pytest.raises(InvalidMaterial, match="gamma"):
        make_eos(data)


def test_reserved_parameter():
    data = MaterialModelData(parameters={"verbose": 1})

    with pytest.raises(InvalidMaterial, match="verbose"):
        make_eos(data)


def test_missing_parameter(mocker):
    class Tabulated(EOS):
        type = EOSType.STIFFENED_GAS

        def __init__(self, table, data=None, verbose=False):
            self.table = table
            super().__init__(data, verbose)

        def p(self, rho, e):
            return rho * e

        def e(self, rho, p):
            return p / rho

        def rho(self, p, e):
            return p / e

        def dpdrho(self, rho, e):
            return e

        def big_gamma(self, rho, e):
            return 1.0

    mocker.patch.dict(
        material.EOS_MODELS, {EOSType.STIFFENED_GAS: Tabulated}
    )

    with pytest.raises(InvalidMaterial, match="table"):
        make_eos(MaterialModelData())

    eos = make_eos(MaterialModelData(parameters={"table": 3.0}))
    assert eos.table == 3.0


def test_selection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="fluideos.euler.material"):
        make_eos(MaterialModelData(eos=EOSType.JWL))

    assert "Selected JWL" in caplog.text


def test_applied_defaults_are_logged(caplog):
    data = MaterialModelData(parameters={"gamma": 4.4})

    with caplog.at_level(logging.DEBUG, logger="fluideos.euler.material"):
        eos = make_eos(data)

    assert eos.p0 == 1e9
    assert "Default parameters applied" in caplog.text
    assert "'p0': 1000000000.0" in caplog.text
    assert "gamma" not in caplog.text.split("Default parameters")[1]
