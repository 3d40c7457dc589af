# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

r""" This module contains the abstract Equation of State (EOS) of a single
material together with the generic algebra built on top of it: the
conservative/primitive transforms, the derived quantities (sound velocity,
Mach number, total enthalpy) and the admissibility safeguards.

Every concrete material model only has to provide five relations

.. math::

    p(\rho, e), \quad e(\rho, p), \quad \rho(p, e), \quad
    \pdv{p}{\rho}\eval_e, \quad
    \Gamma = \frac{1}{\rho}\pdv{p}{e}\eval_\rho

All the methods work on a single grid point as well as, elementwise, on a
stack of points (the last axis being the state fields).
"""

from __future__ import annotations

import abc
import logging

import numpy as np

from typing import Optional, Tuple, Union

from fluideos.config import EOSType, MaterialModelData
from fluideos.exceptions import (
    InvalidMaterial,
    NonPhysicalState,
    UndefinedRelation,
)

from .fields import ConsFields, EulerFields, PrimFields
from .state import ConsState, EulerState, PrimState

ArrayAndScalar = Union[np.ndarray, float]

logger = logging.getLogger(__name__)

__all__ = ["ArrayAndScalar", "EOS", "EOSType", "PerfectGas", "StiffenedGas"]


def _fmt(values: ArrayAndScalar) -> str:
    return np.array2string(
        np.asarray(values, dtype=float),
        formatter={"float_kind": "{:e}".format},
    )


class EOS(abc.ABC):
    r"""An Abstract Base Class representing the EOS of one material region.

    An instance is created once per material and can be shared by any number
    of concurrent evaluations: after construction it holds no mutable state.

    Attributes
    ----------
    type
        The :class:`EOSType` of the material model. Every concrete model sets
        it as a class attribute
    rhomin
        The density floor used by :meth:`clip_density_and_pressure`
    pmin
        The pressure floor used by :meth:`clip_density_and_pressure`
    verbose
        If ``True``, clipping and failed state checks are logged
    """

    type: EOSType

    def __init__(
        self, data: Optional[MaterialModelData] = None, verbose: bool = False
    ):
        if data is None:
            data = MaterialModelData(eos=self.type)

        if data.eos is not self.type:
            raise InvalidMaterial(
                f"{type(self).__name__} implements a {self.type.name} EOS, "
                f"the material describes a {data.eos.name} one"
            )

        self._data = data
        self._verbose = bool(verbose)

        logger.debug(
            f"Created {type(self).__name__} material model: "
            f"rhomin = {data.rhomin:e}, pmin = {data.pmin:e}"
        )

    @property
    def data(self) -> MaterialModelData:
        return self._data

    @property
    def rhomin(self) -> float:
        return self._data.rhomin

    @property
    def pmin(self) -> float:
        return self._data.pmin

    @property
    def verbose(self) -> bool:
        return self._verbose

    # ----- Material relations -----

    @abc.abstractmethod
    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        """Returns the pressure from the density and the internal energy per
        unit mass"""
        raise UndefinedRelation("p", type(self).__name__)

    @abc.abstractmethod
    def e(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        """Returns the internal energy per unit mass from the density and
        the pressure. At fixed density it is the inverse of :meth:`p`"""
        raise UndefinedRelation("e", type(self).__name__)

    @abc.abstractmethod
    def rho(self, p: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        """Returns the density from the pressure and the internal energy per
        unit mass"""
        raise UndefinedRelation("rho", type(self).__name__)

    @abc.abstractmethod
    def dpdrho(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        r"""Returns :math:`\pdv{p}{\rho}` at constant internal energy"""
        raise UndefinedRelation("dpdrho", type(self).__name__)

    @abc.abstractmethod
    def big_gamma(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        r"""Returns :math:`\Gamma = \frac{1}{\rho}\pdv{p}{e}` at constant
        density.

        It is called "big gamma" to distinguish it from the ratio of specific
        heats :math:`\gamma` of perfect and stiffened gases
        """
        raise UndefinedRelation("big_gamma", type(self).__name__)

    # ----- Transformation operators -----

    @staticmethod
    def _kinematics(
        U: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Splits a conservative state into density, velocity and internal
        energy per unit mass"""
        fields = ConsFields

        rho = U[..., fields.rho]
        UVW = U[..., fields.rhoU : fields.rhoW + 1] / rho[..., np.newaxis]
        e = (U[..., fields.rhoE] - 0.5 * rho * np.sum(UVW**2, axis=-1)) / rho

        return rho, UVW, e

    def cons_to_prim(self, U: np.ndarray) -> PrimState:
        r"""Converts conservative states into primitive states

        .. math::

            \rho e = \rho E - \frac{1}{2} \rho \norm{\vb{u}}^2 \qquad
            p = p(\rho, e)

        Parameters
        ----------
        U
            An array whose last axis holds :math:`(\rho, \rho u, \rho v, \rho
            w, \rho E)`. The density must be strictly positive

        Returns
        -------
        V
            A new :class:`PrimState` with the same leading shape as ``U``
        """
        U = np.asarray(U, dtype=float)
        fields = PrimFields

        rho, UVW, e = self._kinematics(U)

        V = np.empty_like(U).view(PrimState)
        V[..., fields.rho] = rho
        V[..., fields.U : fields.W + 1] = UVW
        V[..., fields.p] = self.p(rho, e)

        return V

    def prim_to_cons(self, V: np.ndarray) -> ConsState:
        r"""Converts primitive states into conservative states

        .. math::

            e = e(\rho, p) \qquad
            \rho E = \rho \qty(e + \frac{1}{2} \norm{\vb{u}}^2)

        It is the exact inverse of :meth:`cons_to_prim` as long as :meth:`p`
        and :meth:`e` are inverse of each other.
        """
        V = np.asarray(V, dtype=float)
        fields = PrimFields

        rho = V[..., fields.rho]
        UVW = V[..., fields.U : fields.W + 1]
        e = self.e(rho, V[..., fields.p])

        U = np.empty_like(V).view(ConsState)
        U[..., ConsFields.rho] = rho
        U[..., ConsFields.rhoU : ConsFields.rhoW + 1] = (
            rho[..., np.newaxis] * UVW
        )
        U[..., ConsFields.rhoE] = rho * (e + 0.5 * np.sum(UVW**2, axis=-1))

        return U

    # ----- Derived quantities -----

    def sound_velocity_square(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        r"""Returns the square of the sound velocity

        .. math::

            c^2 = \pdv{p}{\rho}\eval_e + \frac{p}{\rho} \Gamma

        The value is not checked and can be non-positive. Use
        :meth:`sound_velocity` when a real sound velocity is needed
        """
        return self.dpdrho(rho, e) + self.p(rho, e) / rho * self.big_gamma(
            rho, e
        )

    def _assert_hyperbolic(
        self,
        c2: ArrayAndScalar,
        rho: ArrayAndScalar,
        e: ArrayAndScalar,
        where: str,
    ):
        # NaN counts as non-hyperbolic too
        bad = ~(np.asarray(c2) > 0)

        if np.any(bad):
            c2_bad = np.extract(bad, c2)
            rho_bad = np.extract(bad, np.broadcast_to(rho, bad.shape))
            e_bad = np.extract(bad, np.broadcast_to(e, bad.shape))

            message = (
                f"Cannot compute the {where}, the square of the sound "
                f"velocity is not positive: c^2 = {_fmt(c2_bad)}, "
                f"rho = {_fmt(rho_bad)}, e = {_fmt(e_bad)}"
            )
            logger.error(message)

            raise NonPhysicalState(message, rho=rho_bad, e=e_bad, c2=c2_bad)

    def sound_velocity(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        """This returns the sound velocity from density and internal energy
        per unit mass

        Raises
        ------
        NonPhysicalState
            If the square of the sound velocity is not positive for (any of)
            the given states. The hyperbolicity of the system is lost and
            there's no meaningful value to return
        """
        c2 = self.sound_velocity_square(rho, e)
        self._assert_hyperbolic(c2, rho, e, "sound velocity")

        return np.sqrt(c2)

    def mach_number(self, V: np.ndarray) -> ArrayAndScalar:
        r"""Returns the Mach number :math:`\norm{\vb{u}} / c` of primitive
        states

        Raises
        ------
        NonPhysicalState
            Same conditions as :meth:`sound_velocity`
        """
        V = np.asarray(V, dtype=float)
        fields = PrimFields

        rho = V[..., fields.rho]
        e = self.e(rho, V[..., fields.p])

        c2 = self.sound_velocity_square(rho, e)
        self._assert_hyperbolic(c2, rho, e, "Mach number")

        U = np.linalg.norm(V[..., fields.U : fields.W + 1], axis=-1)

        return U / np.sqrt(c2)

    def total_enthalpy(self, V: np.ndarray) -> ArrayAndScalar:
        r"""Returns the total enthalpy per unit mass of primitive states

        .. math::

            H = e + \frac{1}{2}\norm{\vb{u}}^2 + \frac{p}{\rho}
              = \frac{\rho E + p}{\rho}
        """
        V = np.asarray(V, dtype=float)
        fields = PrimFields

        rho = V[..., fields.rho]
        p = V[..., fields.p]
        UVW = V[..., fields.U : fields.W + 1]

        return self.e(rho, p) + 0.5 * np.sum(UVW**2, axis=-1) + p / rho

    # ----- Admissibility -----

    def check_state(self, V: np.ndarray) -> bool:
        r"""Checks that the Euler equations are still hyperbolic

        Returns
        -------
        invalid
            ``True`` if the density is not positive or :math:`c^2 \le 0` for
            (any of) the given primitive states. This is a signal for the
            caller, nothing is raised
        """
        V = np.asarray(V, dtype=float)
        fields = PrimFields

        rho = V[..., fields.rho]
        p = V[..., fields.p]

        with np.errstate(all="ignore"):
            e = self.e(rho, p)
            c2 = self.dpdrho(rho, e) + p / rho * self.big_gamma(rho, e)

            invalid = (rho <= 0) | ~(np.asarray(c2) > 0)

        if not np.any(invalid):
            return False

        if self.verbose:
            logger.warning(
                "Negative density or violation of hyperbolicity. "
                f"rho = {_fmt(np.extract(invalid, rho))}, "
                f"p = {_fmt(np.extract(invalid, p))}"
            )

        return True

    def clip_density_and_pressure(
        self, V: np.ndarray, U: Optional[np.ndarray] = None
    ) -> bool:
        """Raises density and pressure that fall below the material floors
        up to :attr:`rhomin` and :attr:`pmin`.

        ``V`` is modified in place. If a conservative buffer ``U`` is given,
        the clipped states are recomputed in it from the clipped ``V`` so that
        both representations stay consistent.

        Parameters
        ----------
        V
            A floating point :class:`numpy.ndarray` of primitive states
        U
            An optional :class:`numpy.ndarray` of the matching conservative
            states. It must not share memory with ``V``

        Returns
        -------
        clipped
            ``True`` if (any) density or pressure was clipped

        Raises
        ------
        TypeError
            If a buffer is not a floating point :class:`numpy.ndarray`, the
            floors could not be stored in it
        """
        for name, buffer in (("V", V), ("U", U)):
            if buffer is None:
                continue

            if not isinstance(buffer, np.ndarray):
                raise TypeError(
                    f"{name} must be a numpy array to be clipped in place"
                )

            if not np.issubdtype(buffer.dtype, np.floating):
                raise TypeError(
                    f"{name} must hold floating point values to be clipped, "
                    f"got {buffer.dtype}"
                )

        fields = PrimFields

        rho = V[..., fields.rho]
        p = V[..., fields.p]

        clip_rho = np.asarray(rho < self.rhomin)
        clip_p = np.asarray(p < self.pmin)

        if np.any(clip_rho):
            if self.verbose:
                logger.warning(
                    f"Clip density from {_fmt(np.extract(clip_rho, rho))} "
                    f"to {self.rhomin:e}"
                )
            V[..., fields.rho] = np.where(clip_rho, self.rhomin, rho)

        if np.any(clip_p):
            if self.verbose:
                logger.warning(
                    f"Clip pressure from {_fmt(np.extract(clip_p, p))} "
                    f"to {self.pmin:e}"
                )
            V[..., fields.p] = np.where(clip_p, self.pmin, p)

        clipped = np.asarray(clip_rho | clip_p)

        if not np.any(clipped):
            return False

        if U is not None:
            U[...] = np.where(
                clipped[..., np.newaxis], self.prim_to_cons(V), U
            )

        return True

    # ----- Solver support -----

    def auxiliary_update(self, values: EulerState):
        """Fills the auxiliary variables of full :class:`EulerState` values
        from their conservative part. Solvers call it after each step, once
        the conservative variables are updated.

        Raises
        ------
        NonPhysicalState
            If the sound velocity cannot be computed for (any of) the states
        TypeError
            If ``values`` is not a :class:`numpy.ndarray`
        """
        if not isinstance(values, np.ndarray):
            raise TypeError(
                "The values must be a numpy array to be updated in place"
            )

        arr = values.view(np.ndarray)
        fields = EulerFields

        cons = arr[..., EulerState.cons_state._subset_fields_map]
        rho, UVW, e = self._kinematics(cons)

        arr[..., fields.rhoe] = rho * e
        arr[..., fields.U : fields.W + 1] = UVW
        arr[..., fields.p] = self.p(rho, e)
        arr[..., fields.c] = self.sound_velocity(rho, e)
        arr[..., fields.e] = e


class PerfectGas(EOS):
    r"""This class embeds methods to compute states for the Euler problem
    using an EOS (Equation of State) for perfect gases

    .. math::

        p = \rho \mathcal{R} T = \rho \left( \gamma - 1 \right)e


    Attributes
    ----------
    gamma
        The adiabatic coefficient
    """

    type = EOSType.STIFFENED_GAS

    def __init__(
        self,
        gamma: float = 1.4,
        data: Optional[MaterialModelData] = None,
        verbose: bool = False,
    ):
        if gamma <= 1:
            raise InvalidMaterial(
                f"The adiabatic coefficient must be > 1, got {gamma}"
            )

        self.gamma = gamma
        super().__init__(data, verbose)

    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        """This returns the pressure from density and internal energy

        Parameters
        ----------
        rho
            A :class:`ArrayAndScalar` containing the values of the density

        e
            A :class:`ArrayAndScalar` containing the values of the internal
            energy per unit mass

        Returns
        -------
        p
            A :class:`ArrayAndScalar` containing the values of the pressure
        """
        return (self.gamma - 1) * np.multiply(rho, e)

    def e(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        return np.divide(p, rho) / (self.gamma - 1)

    def rho(self, p: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        return p / (self.gamma - 1) / e

    def dpdrho(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        return (self.gamma - 1) * np.asarray(e, dtype=float)

    def big_gamma(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        return (self.gamma - 1) * np.ones_like(rho, dtype=float)


class StiffenedGas(PerfectGas):
    r"""A stiffened gas, the usual model for liquids in compressible flows

    .. math::

        p = \qty(\gamma - 1) \rho e - \gamma p_0

    The sound velocity reduces to :math:`c^2 = \gamma (p + p_0) / \rho`.

    Attributes
    ----------
    gamma
        The adiabatic coefficient
    p0
        The stiffening pressure
    """

    def __init__(
        self,
        gamma: float = 3,
        p0: float = 1e9,
        data: Optional[MaterialModelData] = None,
        verbose: bool = False,
    ):
        super().__init__(gamma, data, verbose)
        self.p0 = p0

    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        return (self.gamma - 1) * np.multiply(rho, e) - self.p0 * self.gamma

    def e(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        return np.divide(p + self.gamma * self.p0, rho) / (self.gamma - 1)

    def rho(self, p: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        return (p + self.p0 * self.gamma) / (self.gamma - 1) / e
