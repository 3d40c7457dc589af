# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Optional

from scipy.optimize import root_scalar

from fluideos.config import EOSType, MaterialModelData
from fluideos.exceptions import InvalidMaterial, NonPhysicalState

from .eos import EOS, ArrayAndScalar


class JWL(EOS):
    r"""The Jones-Wilkins-Lee EOS of detonation products

    .. math::

        p = \omega \rho e
            + A_1 \qty(1 - \frac{\omega \rho}{R_1 \rho_0})
                e^{-R_1 \rho_0 / \rho}
            + A_2 \qty(1 - \frac{\omega \rho}{R_2 \rho_0})
                e^{-R_2 \rho_0 / \rho}

    The default parameters are the ones of TNT.

    Attributes
    ----------
    omega
        The Grüneisen coefficient of the products, :math:`\Gamma = \omega`
    A1, A2
        The pressure coefficients
    R1, R2
        The dimensionless decay coefficients
    rho0
        The density of the unreacted explosive
    """

    type = EOSType.JWL

    def __init__(
        self,
        omega: float = 0.3,
        A1: float = 3.712e11,
        A2: float = 3.231e9,
        R1: float = 4.15,
        R2: float = 0.95,
        rho0: float = 1630.0,
        data: Optional[MaterialModelData] = None,
        verbose: bool = False,
    ):
        if omega <= 0 or rho0 <= 0 or R1 <= 0 or R2 <= 0:
            raise InvalidMaterial(
                "JWL needs positive omega, R1, R2 and rho0, got "
                f"omega = {omega}, R1 = {R1}, R2 = {R2}, rho0 = {rho0}"
            )

        self.omega = omega
        self.A1 = A1
        self.A2 = A2
        self.R1 = R1
        self.R2 = R2
        self.rho0 = rho0

        super().__init__(data, verbose)

    def _cold(self, rho: ArrayAndScalar) -> ArrayAndScalar:
        """The part of the pressure that depends only on the density"""
        cold = 0.0
        for A, R in ((self.A1, self.R1), (self.A2, self.R2)):
            Rrho0 = R * self.rho0
            cold = cold + A * (1 - self.omega * rho / Rrho0) * np.exp(
                -Rrho0 / rho
            )

        return cold

    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        return self.omega * np.multiply(rho, e) + self._cold(rho)

    def e(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        return (p - self._cold(rho)) / (self.omega * np.asarray(rho))

    def dpdrho(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        rho = np.asarray(rho, dtype=float)
        dpdrho = self.omega * np.asarray(e, dtype=float)

        for A, R in ((self.A1, self.R1), (self.A2, self.R2)):
            Rrho0 = R * self.rho0
            dpdrho = dpdrho + A * np.exp(-Rrho0 / rho) * (
                -self.omega / Rrho0
                + (1 - self.omega * rho / Rrho0) * Rrho0 / rho**2
            )

        return dpdrho

    def big_gamma(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        return self.omega * np.ones_like(rho, dtype=float)

    def _solve_rho(self, p: float, e: float) -> float:
        opt = root_scalar(
            lambda rho: self.p(rho, e) - p,
            fprime=lambda rho: self.dpdrho(rho, e),
            x0=self.rho0,
            method="newton",
        )

        if not (opt.converged) or not (opt.root > 0):
            raise NonPhysicalState(
                "The root finding algorithm could not find a density for "
                f"p = {p:e}, e = {e:e}",
                e=e,
            )

        return opt.root

    def rho(self, p: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        """This returns the density from pressure and internal energy.

        The relation is not invertible in closed form, a Newton iteration
        starting from :attr:`rho0` is run for each state

        Raises
        ------
        NonPhysicalState
            If the iteration does not converge to a positive density
        """
        rho = np.vectorize(self._solve_rho, otypes=[float])(p, e)

        return rho[()]
