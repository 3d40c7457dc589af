# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import numpy as np

from typing import Optional

from fluideos.config import EOSType, MaterialModelData
from fluideos.exceptions import InvalidMaterial, NonPhysicalState

from .eos import EOS, ArrayAndScalar


class MieGruneisen(EOS):
    r"""A Mie-Grüneisen EOS referenced on the Hugoniot of a linear
    :math:`U_s = c_0 + s u_p` shock-particle velocity relation

    .. math::

        p = \frac{\rho_0 c_0^2 \eta \qty(1 - \frac{\Gamma_0}{2} \eta)}
                 {\qty(1 - s \eta)^2}
            + \Gamma_0 \rho_0 \qty(e - e_0)
        \qquad \eta = 1 - \frac{\rho_0}{\rho}

    The default parameters are the ones of copper.

    Attributes
    ----------
    rho0
        The reference density
    c0
        The bulk sound velocity at the reference state
    Gamma0
        The Grüneisen coefficient at the reference state
    s
        The slope of the :math:`U_s - u_p` relation
    e0
        The internal energy per unit mass at the reference state
    """

    type = EOSType.MIE_GRUNEISEN

    def __init__(
        self,
        rho0: float = 8924.0,
        c0: float = 3910.0,
        Gamma0: float = 1.96,
        s: float = 1.51,
        e0: float = 0.0,
        data: Optional[MaterialModelData] = None,
        verbose: bool = False,
    ):
        if rho0 <= 0 or c0 <= 0:
            raise InvalidMaterial(
                "Mie-Grüneisen needs positive rho0 and c0, got "
                f"rho0 = {rho0}, c0 = {c0}"
            )

        self.rho0 = rho0
        self.c0 = c0
        self.Gamma0 = Gamma0
        self.s = s
        self.e0 = e0

        super().__init__(data, verbose)

    def _eta(self, rho: ArrayAndScalar) -> ArrayAndScalar:
        return 1 - np.divide(self.rho0, rho)

    def _hugoniot(self, rho: ArrayAndScalar) -> ArrayAndScalar:
        """The reference pressure, the part that depends only on the
        density"""
        eta = self._eta(rho)

        return (
            self.rho0
            * self.c0**2
            * eta
            * (1 - 0.5 * self.Gamma0 * eta)
            / (1 - self.s * eta) ** 2
        )

    def p(self, rho: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        return self._hugoniot(rho) + self.Gamma0 * self.rho0 * (
            np.asarray(e) - self.e0
        )

    def e(self, rho: ArrayAndScalar, p: ArrayAndScalar) -> ArrayAndScalar:
        return (p - self._hugoniot(rho)) / (self.Gamma0 * self.rho0) + self.e0

    def dpdrho(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        eta = self._eta(rho)

        return (
            self.rho0
            * self.c0**2
            * (1 + (self.s - self.Gamma0) * eta)
            / (1 - self.s * eta) ** 3
            * self.rho0
            / np.asarray(rho) ** 2
        )

    def big_gamma(
        self, rho: ArrayAndScalar, e: ArrayAndScalar
    ) -> ArrayAndScalar:
        return self.Gamma0 * np.divide(self.rho0, rho)

    def rho(self, p: ArrayAndScalar, e: ArrayAndScalar) -> ArrayAndScalar:
        r"""This returns the density from pressure and internal energy.

        With :math:`K = p - \Gamma_0 \rho_0 (e - e_0)`, :math:`\eta` solves

        .. math::

            \qty(\frac{\rho_0 c_0^2 \Gamma_0}{2} + K s^2) \eta^2
            - \qty(\rho_0 c_0^2 + 2 K s) \eta + K = 0

        and the root continuously connected to :math:`\eta = 0` at
        :math:`K = 0` is retained.

        Raises
        ------
        NonPhysicalState
            If no density is compatible with the given pressure and internal
            energy
        """
        K = np.asarray(p) - self.Gamma0 * self.rho0 * (np.asarray(e) - self.e0)
        rc2 = self.rho0 * self.c0**2

        a = 0.5 * rc2 * self.Gamma0 + K * self.s**2
        b = -(rc2 + 2 * K * self.s)
        disc = b**2 - 4 * a * K

        with np.errstate(invalid="ignore", divide="ignore"):
            # Smallest root, written to stay finite when a -> 0
            eta = 2 * K / (-b + np.sqrt(disc))
            rho = self.rho0 / (1 - eta)

        bad = ~(np.asarray(rho) > 0)
        if np.any(bad):
            raise NonPhysicalState(
                "No density is compatible with "
                f"p = {np.extract(bad, np.broadcast_to(p, bad.shape))}, "
                f"e = {np.extract(bad, np.broadcast_to(e, bad.shape))}",
                e=e,
            )

        return rho
