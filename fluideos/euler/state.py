# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

r"""
The state of one grid point of the Euler system is represented either by its
primitive variables

.. math::

    \vb{V} = \qty(\rho, u, v, w, p)

or by its conservative variables

.. math::

    \vb{U} = \qty(\rho, \rho u, \rho v, \rho w, \rho E)

A solver usually stores one big state containing the conservative variables
together with the "auxiliary" variables that are needed, for example, to
compute the speed of sound:

* ``rho``: density :math:`\rho`
* ``rhoU``, ``rhoV``, ``rhoW``: momentum components :math:`\rho \vb{u}`
* ``rhoE``: total energy multiplied by the density :math:`\rho E`
* ``rhoe``: internal energy multiplied by the density :math:`\rho e`
* ``U``, ``V``, ``W``: velocity components :math:`\vb{u}`
* ``p``: pressure :math:`p`
* ``c``: sound velocity :math:`c`
* ``e``: internal energy per unit mass :math:`e`
"""
from __future__ import annotations

from typing import Type

from fluideos.state import State, SubsetState

from .fields import ConsFields, EulerFields, PrimFields


class PrimState(State):
    """The primitive state :math:`(\\rho, u, v, w, p)`"""

    fields = PrimFields


class ConsState(State):
    """The conservative state :math:`(\\rho, \\rho u, \\rho v, \\rho w, \\rho
    E)`"""

    fields = ConsFields


class EulerConsState(SubsetState):
    """The conservative subset of an :class:`EulerState`"""

    full_state_fields = EulerFields
    fields = ConsFields


class EulerPrimState(SubsetState):
    """The primitive subset of an :class:`EulerState`"""

    full_state_fields = EulerFields
    fields = PrimFields


class EulerState(State):
    """The full state of the Euler system, conservative plus auxiliary
    variables. The auxiliary variables are filled by
    :meth:`~.EOS.auxiliary_update`"""

    fields = EulerFields
    cons_state: Type[SubsetState] = EulerConsState
    prim_state: Type[SubsetState] = EulerPrimState

    def get_conservative(self) -> ConsState:
        """Returns a copy of the conservative part of the state"""
        return self[..., self.cons_state._subset_fields_map].view(ConsState)

    def set_conservative(self, values: State):
        """Set the conservative part of the state"""
        self[..., self.cons_state._subset_fields_map] = values

    def get_primitive(self) -> PrimState:
        """Returns a copy of the primitive part of the state"""
        return self[..., self.prim_state._subset_fields_map].view(PrimState)

    def set_primitive(self, values: State):
        """Set the primitive part of the state"""
        self[..., self.prim_state._subset_fields_map] = values
