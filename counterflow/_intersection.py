# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module contains the intersection of equilibrium curves with straight
operating lines, solved as a bounded scalar minimization of the squared
vertical gap between curve and line.

"""
from scipy.optimize import minimize_scalar
from math import isfinite
from typing import NamedTuple
from ._exceptions import InfeasibleRegion
from ._settings import settings

__all__ = ('Intersection', 'operating_line', 'intersect_equilibrium_curve')

class Intersection(NamedTuple):
    solute: float #: Located solute mass fraction
    solvent: float #: Solvent mass fraction on the equilibrium curve
    residual: float #: Squared vertical gap between curve and line at the solution


def operating_line(a, b):
    """
    Return the slope and intercept of the straight line through points
    `a` and `b` in (solute, solvent) coordinates.

    Examples
    --------
    >>> operating_line((0., 1.), (0.5, 0.))
    (-2.0, 1.0)

    """
    aS, aD = a
    bS, bD = b
    dS = bS - aS
    if dS == 0.:
        raise InfeasibleRegion(
            'operating line',
            f'operating line through ({aS:.4g}, {aD:.4g}) and ({bS:.4g}, {bD:.4g}) '
            'has constant solute fraction'
        )
    m = (bD - aD) / dS
    if not isfinite(m):
        raise InfeasibleRegion('operating line', f'operating line slope is {m}')
    return m, aD - m * aS


def intersect_equilibrium_curve(f, a, b, bounds, xtol=None):
    """
    Return the Intersection of an equilibrium curve with the straight line
    through points `a` and `b`.

    Parameters
    ----------
    f : Callable[float, float]
        Equilibrium curve. Should return the solvent mass fraction given
        the solute mass fraction.
    a, b : tuple[float, float]
        Points (solute, solvent) defining the operating line.
    bounds : tuple[float, float]
        Search bracket of the solute mass fraction.
    xtol : float, optional
        Absolute tolerance of the minimizer. Defaults to `settings.xtol`.

    Notes
    -----
    The squared gap is assumed to be unimodal in the bracket. If the line
    does not cross the curve within the bracket, the minimizer settles near
    the closest approach (often a bound) and the residual is significantly
    above zero.

    """
    m, c = operating_line(a, b)
    lb, ub = bounds
    if xtol is None: xtol = settings.xtol
    gap = lambda x: (f(x) - (m * x + c)) ** 2
    if ub <= lb:
        x = lb
        residual = gap(x)
    else:
        result = minimize_scalar(gap, bounds=(lb, ub), method='bounded',
                                 options=dict(xatol=xtol))
        x = result.x
        residual = result.fun
    return Intersection(float(x), float(f(x)), float(residual))
