# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Material description records, as read from a simulation input """

from __future__ import annotations

import numbers

import numpy as np

from dataclasses import dataclass, field, fields
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Union

from .exceptions import InvalidMaterial


class EOSType(IntEnum):
    """The family of material models an :class:`~.EOS` belongs to"""

    STIFFENED_GAS = 0
    MIE_GRUNEISEN = 1
    JWL = 2

    @classmethod
    def parse(cls, value: Union[EOSType, str, int]) -> EOSType:
        """Returns the :class:`EOSType` matching a member, its name
        (case-insensitive, ``-`` and spaces allowed) or its integer value"""

        if isinstance(value, cls):
            return value

        try:
            if isinstance(value, bool):
                raise ValueError(value)

            if isinstance(value, str):
                key = value.strip().upper().replace("-", "_").replace(" ", "_")
                return cls[key]

            return cls(value)
        except (KeyError, ValueError):
            choices = ", ".join(m.name for m in cls)
            raise InvalidMaterial(
                f"Unknown EOS type {value!r}. Valid choices are: {choices}"
            ) from None


@dataclass(frozen=True)
class MaterialModelData:
    r"""The description of one material region.

    An instance is created once per material and shared, read-only, by all
    the evaluations of the :class:`~.EOS` bound to it.

    Attributes
    ----------
    eos
        The family of the equation of state
    rhomin
        The density floor. States with :math:`\rho < \rho_\text{min}` are
        clipped. The default disables clipping
    pmin
        The pressure floor. States with :math:`p < p_\text{min}` are clipped.
        The default disables clipping
    parameters
        The constants of the equation of state (e.g. ``gamma`` and ``p0``
        for a stiffened gas)
    """

    eos: EOSType = EOSType.STIFFENED_GAS
    rhomin: float = -np.inf
    pmin: float = -np.inf
    parameters: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the parameters too, the record is shared between evaluations
        object.__setattr__(self, "eos", EOSType.parse(self.eos))
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters))
        )

        for name in ("rhomin", "pmin"):
            object.__setattr__(
                self, name, _as_float(name, getattr(self, name))
            )

        for name, value in self.parameters.items():
            _as_float(name, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MaterialModelData:
        """Builds the record from a plain mapping, e.g. the ``material``
        section of a parsed input file

        >>> data = MaterialModelData.from_dict(
        ...     {"eos": "stiffened_gas", "pmin": 1e-6,
        ...      "parameters": {"gamma": 4.4, "p0": 6e8}}
        ... )
        >>> data.eos
        <EOSType.STIFFENED_GAS: 0>
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known

        if unknown:
            raise InvalidMaterial(
                f"Unknown material keys: {', '.join(sorted(unknown))}"
            )

        if "eos" not in data:
            raise InvalidMaterial("The material needs an `eos` entry")

        parameters = data.get("parameters", {})
        if not isinstance(parameters, Mapping):
            raise InvalidMaterial(
                "The material `parameters` entry must be a mapping"
            )

        return cls(**data)


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidMaterial(
            f"Material entry `{name}` must be a real number, got {value!r}"
        )

    return float(value)
