# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Selection of the :class:`~.EOS` matching a material description """

from __future__ import annotations

import inspect
import logging

from typing import Dict, Type

from fluideos.config import EOSType, MaterialModelData
from fluideos.exceptions import InvalidMaterial

from .eos import EOS, StiffenedGas
from .jwl import JWL
from .mie_gruneisen import MieGruneisen

logger = logging.getLogger(__name__)

EOS_MODELS: Dict[EOSType, Type[EOS]] = {
    EOSType.STIFFENED_GAS: StiffenedGas,
    EOSType.MIE_GRUNEISEN: MieGruneisen,
    EOSType.JWL: JWL,
}

# Handled by the base class, not material constants
_RESERVED = {"self", "data", "verbose"}


def make_eos(data: MaterialModelData, verbose: bool = False) -> EOS:
    """Builds the :class:`~.EOS` of a material region

    Parameters
    ----------
    data
        The material description. Its ``parameters`` are passed as keyword
        arguments to the constructor of the model selected by ``data.eos``
    verbose
        Whether the model logs clipping and failed state checks

    Constants left out of ``parameters`` that the model constructor defaults
    (e.g. the water-like ``gamma`` and ``p0`` of :class:`~.StiffenedGas`) take
    that default, which is logged at DEBUG level. Only constants without a
    default are reported as missing.

    Raises
    ------
    InvalidMaterial
        If a parameter is unknown to the selected model, or a required one is
        missing

    >>> data = MaterialModelData(
    ...     eos=EOSType.STIFFENED_GAS, parameters={"gamma": 1.4, "p0": 0}
    ... )
    >>> make_eos(data).gamma
    1.4
    """
    eos_cls = EOS_MODELS[data.eos]

    signature = inspect.signature(eos_cls.__init__)
    accepted = {
        name: param
        for name, param in signature.parameters.items()
        if name not in _RESERVED
    }

    unknown = set(data.parameters) - set(accepted)
    if unknown:
        raise InvalidMaterial(
            f"Unknown parameters for a {data.eos.name} EOS: "
            f"{', '.join(sorted(unknown))}. "
            f"Accepted: {', '.join(accepted)}"
        )

    missing = [
        name
        for name, param in accepted.items()
        if param.default is inspect.Parameter.empty
        and name not in data.parameters
    ]
    if missing:
        raise InvalidMaterial(
            f"Missing parameters for a {data.eos.name} EOS: "
            f"{', '.join(missing)}"
        )

    defaults = {
        name: param.default
        for name, param in accepted.items()
        if param.default is not inspect.Parameter.empty
        and name not in data.parameters
    }

    logger.debug(
        f"Selected {eos_cls.__name__} for a {data.eos.name} material with "
        f"parameters {dict(data.parameters)}"
    )
    if defaults:
        logger.debug(
            f"Default parameters applied for a {data.eos.name} EOS: "
            f"{defaults}"
        )

    return eos_cls(**data.parameters, data=data, verbose=verbose)
