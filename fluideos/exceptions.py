# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

""" Exceptions raised while evaluating an equation of state

Two families are kept apart: :class:`UndefinedRelation` flags a defect in an
:class:`~.EOS` implementation, while :class:`NonPhysicalState` flags a state
for which no real-valued thermodynamic quantity exists. Recoverable range
violations (density or pressure below the material floors) never raise, they
are clipped by :meth:`~.EOS.clip_density_and_pressure`.
"""

from __future__ import annotations

from typing import Any, Optional


class EOSError(Exception):
    """Base class of all the errors raised by :mod:`fluideos`"""


class UndefinedRelation(EOSError, NotImplementedError):
    """Raised when a thermodynamic relation is evaluated on a model that does
    not provide it"""

    def __init__(self, relation: str, model: str = "EOS"):
        super().__init__(
            f"{relation} is not defined for the material model {model}"
        )
        self.relation = relation
        self.model = model


class NonPhysicalState(EOSError, ArithmeticError):
    r"""Raised when a state has no real sound velocity (:math:`c^2 \le 0`) or
    when a relation cannot be inverted for the given inputs

    Attributes
    ----------
    rho
        The density of the offending state(s)
    e
        The internal energy per unit mass of the offending state(s)
    c2
        The squared sound velocity, if it was computed
    """

    def __init__(
        self,
        message: str,
        rho: Any = None,
        e: Any = None,
        c2: Optional[Any] = None,
    ):
        super().__init__(message)
        self.rho = rho
        self.e = e
        self.c2 = c2


class InvalidMaterial(EOSError, ValueError):
    """Raised when a material description cannot be turned into an
    :class:`~.EOS`"""
