# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
.. contents:: :local:

.. autofunction:: counterflow.solve_counter_current_extraction
.. autofunction:: counterflow.counter_current_stages

References
----------
.. [1] J.D. Seader, E.J. Henley, D.K. Roper. (2011)
    Separation Process Principles 3rd Edition. John Wiley & Sons, Inc.

.. [2] R.E. Treybal. (1980) Mass-Transfer Operations 3rd Edition.
    McGraw-Hill. Liquid extraction, continuous countercurrent multistage
    contact.

"""
import numpy as np
import pandas as pd
from math import isfinite
from typing import NamedTuple
from ._exceptions import (
    InvalidInputError, InfeasibleRegion, DegeneratePoleError,
    NonConvergenceError, residual_warning,
)
from ._settings import settings
from ._streams import Composition, FeedStream, MixingPoint, mixing_point
from ._equilibrium import EquilibriumData, EquilibriumCurves
from ._intersection import intersect_equilibrium_curve

__all__ = ('Pole', 'SolveContext', 'StageResults',
           'solve_first_stage', 'construct_pole', 'step_stage',
           'compute_stages_pole_method', 'solve_counter_current_extraction',
           'counter_current_stages')

# %% Data classes

class Pole(NamedTuple):
    flow: float #: Net flow rate of the difference stream, E1 - Ro [kg/hr]
    composition: Composition #: Difference point composition


class SolveContext(NamedTuple):
    """Immutable state shared by every stepping operation of a solve."""
    raffinate_feed: FeedStream
    extract_feed: FeedStream
    target: Composition #: Desired final raffinate composition
    curves: EquilibriumCurves
    mixing_point: MixingPoint
    first_extract_flow: float #: Extract flow rate leaving stage 1 [kg/hr]
    pole: Pole


class StageResults(NamedTuple):
    """
    Results of a counter-current stage calculation. Stage 1 is where the
    raffinate feed enters and the extract product leaves; the last stage
    is where the extract feed enters and the final raffinate leaves.

    """
    extract: np.ndarray #: Extract (solute, solvent) mass fractions by stage
    raffinate: np.ndarray #: Raffinate (solute, solvent) mass fractions by stage
    residuals: np.ndarray #: Intersection residual of each stage
    N_stages: int #: Number of equilibrium stages
    mixing_point: MixingPoint
    pole: Pole
    raffinate_feed: FeedStream
    extract_feed: FeedStream
    curves: EquilibriumCurves
    target: Composition
    first_extract_flow: float #: [kg/hr]
    final_raffinate_flow: float #: [kg/hr]
    max_stages: int #: Stage ceiling used in the calculation
    converged: bool

    def table(self):
        """Return a DataFrame of stage compositions and intersection residuals."""
        index = pd.RangeIndex(1, self.N_stages + 1, name='Stage')
        return pd.DataFrame({
                'Extract solute': self.extract[:, 0],
                'Extract solvent': self.extract[:, 1],
                'Raffinate solute': self.raffinate[:, 0],
                'Raffinate solvent': self.raffinate[:, 1],
                'Residual': self.residuals,
            },
            index=index,
        )

    def plot_stages(self, **kwargs):
        """Plot the stage construction diagram; see :func:`counterflow.plots.plot_stages`."""
        from .plots import plot_stages
        return plot_stages(self, **kwargs)

# %% Stage construction

def solve_first_stage(curves, mixing_point, target, xtol=None):
    """
    Return the extract and raffinate compositions of stage 1 and the
    intersection residual. The extract leaving stage 1 lies where the
    extract equilibrium curve meets the line through the target raffinate
    and the mixing point.

    """
    E1 = intersect_equilibrium_curve(
        curves.extract_solvent, mixing_point.composition, target, (0., 1.), xtol,
    )
    extract = Composition(E1.solute, E1.solvent)
    raffinate = curves.raffinate_composition(curves.raffinate_solute(E1.solute))
    return extract, raffinate, E1.residual

def construct_pole(raffinate_feed, extract_feed, target, first_extract):
    """
    Return the extract flow rate leaving stage 1 and the Pole.

    The extract flow rate comes from an overall solute balance and the pole
    is the difference point E1 - Ro, which lies on the operating line of
    every stage.

    """
    Ro, (xSo, xDo) = raffinate_feed
    Eo, (ySo, _) = extract_feed
    xSn = target.solute
    yS1, yD1 = first_extract
    dS = yS1 - xSn
    if dS == 0.:
        raise InfeasibleRegion(
            'separation', 'stage 1 extract solute fraction equals the target; '
            'the extract flow rate is undefined'
        )
    E1 = (Ro * (xSo - xSn) + Eo * (ySo - xSn)) / dS
    if not (isfinite(E1) and E1 > 0.):
        raise InfeasibleRegion(
            'separation', f'stage 1 extract flow rate ({E1:.4g} kg/hr) is not positive'
        )
    pole_flow = E1 - Ro
    if abs(pole_flow) <= settings.pole_flow_tolerance * (Ro + Eo):
        raise DegeneratePoleError(
            f'pole flow rate ({pole_flow:.4g} kg/hr) is zero; stage 1 extract '
            'and raffinate feed flow rates are equal'
        )
    composition = Composition.mix(E1, first_extract, -Ro, (xSo, xDo))
    if not all([isfinite(i) for i in composition]):
        raise DegeneratePoleError(f'pole composition {tuple(composition)} is not finite')
    return E1, Pole(pole_flow, composition)

def step_stage(context, raffinate, yS_max, xtol=None):
    """
    Return the extract and raffinate compositions of the next stage and
    the intersection residual.

    Parameters
    ----------
    context : SolveContext
    raffinate : tuple[float, float]
        Raffinate composition leaving the current stage.
    yS_max : float
        Upper bound of the extract solute fraction (that of the current stage).
    xtol : float, optional

    """
    curves = context.curves
    E = intersect_equilibrium_curve(
        curves.extract_solvent, context.pole.composition, raffinate, (0., yS_max), xtol,
    )
    extract = Composition(E.solute, E.solvent)
    raffinate = curves.raffinate_composition(curves.raffinate_solute(E.solute))
    return extract, raffinate, E.residual

def compute_stages_pole_method(context, extract_stages, raffinate_stages,
                               residuals, max_stages, xtol=None):
    """
    Use the pole method to step off stages until the raffinate solute
    fraction reaches the target. Append the extract compositions,
    raffinate compositions and intersection residuals of every new stage
    to `extract_stages`, `raffinate_stages` and `residuals` respectively.

    Parameters
    ----------
    context : SolveContext
    extract_stages : list[Composition]
        Extract compositions at each stage. Last element should be the
        starting point for the next stage.
    raffinate_stages : list[Composition]
        Raffinate compositions at each stage. Last element should be the
        starting point for the next stage.
    residuals : list[float]
        Intersection residuals at each stage.
    max_stages : int
        Maximum number of stages.
    xtol : float, optional

    """
    xS_target = context.target.solute + settings.convergence_tolerance
    tolerance = settings.residual_tolerance
    n = len(raffinate_stages)
    while True:
        if n >= max_stages:
            raise NonConvergenceError(
                f'cannot meet specifications! stages > {max_stages}'
            )
        raffinate = raffinate_stages[-1]
        extract, raffinate, residual = step_stage(
            context, raffinate, extract_stages[-1].solute, xtol
        )
        n += 1
        extract_stages.append(extract)
        raffinate_stages.append(raffinate)
        residuals.append(residual)
        residual_warning(n, residual, tolerance)
        xS = raffinate.solute
        if xS <= xS_target: break
        if xS >= raffinate_stages[-2].solute:
            raise NonConvergenceError(
                f'raffinate solute fraction did not decrease at stage {n} '
                f'({raffinate_stages[-2].solute:.4g} to {xS:.4g})'
            )

# %% Solve entry points

def check_specifications(raffinate_feed, extract_feed, target_solute, max_stages):
    raffinate_feed.check('raffinate feed')
    extract_feed.check('extract feed')
    xSo = raffinate_feed.solute
    if not 0. < target_solute < xSo:
        raise InvalidInputError(
            f'target raffinate solute fraction ({target_solute!r}) must be '
            f'between 0 and the raffinate feed solute fraction ({xSo!r})'
        )
    if isinstance(max_stages, bool) or not isinstance(max_stages, (int, np.integer)):
        raise InvalidInputError(f'maximum number of stages must be an integer, not {max_stages!r}')
    if max_stages < 2:
        raise InvalidInputError(f'maximum number of stages must be at least 2, not {max_stages}')

def solve_counter_current_extraction(raffinate_feed, extract_feed, data, xSn,
                                     degree=None, max_stages=None, xtol=None):
    """
    Return the StageResults of a liquid-liquid counter-current extraction
    computed by the pole method over polynomial equilibrium correlations.

    Parameters
    ----------
    raffinate_feed : FeedStream
        Feed to stage 1 carrying the solute.
    extract_feed : FeedStream
        Solvent feed to the last stage.
    data : EquilibriumData
        Experimental tie-line data.
    xSn : float
        Target solute mass fraction of the final raffinate.
    degree : int, optional
        Degree of the equilibrium polynomials. Defaults to `settings.polynomial_degree`.
    max_stages : int, optional
        Stage ceiling. Defaults to `settings.max_stages`.
    xtol : float, optional
        Minimizer tolerance. Defaults to `settings.xtol`.

    Raises
    ------
    InvalidInputError
        Specifications were rejected before solving.
    InfeasibleRegion
        The pole or an operating line cannot be constructed.
    NonConvergenceError
        The target was not reached within `max_stages`. The partial
        StageResults are available as the `results` attribute.

    Examples
    --------
    >>> from counterflow import FeedStream, solve_counter_current_extraction
    >>> from counterflow.examples import reference_data
    >>> results = solve_counter_current_extraction(
    ...     raffinate_feed=FeedStream.from_fractions(200, solute=0.45, solvent=0.),
    ...     extract_feed=FeedStream.from_fractions(400, solute=0., solvent=1.),
    ...     data=reference_data(), xSn=0.06,
    ... )
    >>> results.converged
    True

    """
    if max_stages is None: max_stages = settings.max_stages
    if not isinstance(data, EquilibriumData):
        raise InvalidInputError(f'data must be an EquilibriumData object, not {type(data).__name__!r}')
    check_specifications(raffinate_feed, extract_feed, xSn, max_stages)
    if degree is None: degree = settings.polynomial_degree
    data.check_degree(degree)
    curves = data.fit(degree)
    target = curves.raffinate_composition(xSn)
    M = mixing_point(raffinate_feed, extract_feed)
    E1, R1, residual = solve_first_stage(curves, M, target, xtol)
    residual_warning(1, residual, settings.residual_tolerance)
    E1_flow, pole = construct_pole(raffinate_feed, extract_feed, target, E1)
    context = SolveContext(raffinate_feed, extract_feed, target, curves, M, E1_flow, pole)
    extract_stages = [E1]
    raffinate_stages = [R1]
    residuals = [residual]
    error = None
    try:
        compute_stages_pole_method(context, extract_stages, raffinate_stages,
                                   residuals, max_stages, xtol)
    except NonConvergenceError as e:
        error = e
    results = StageResults(
        extract=np.array(extract_stages, float),
        raffinate=np.array(raffinate_stages, float),
        residuals=np.array(residuals, float),
        N_stages=len(raffinate_stages),
        mixing_point=M,
        pole=pole,
        raffinate_feed=raffinate_feed,
        extract_feed=extract_feed,
        curves=curves,
        target=target,
        first_extract_flow=E1_flow,
        final_raffinate_flow=M.flow - E1_flow,
        max_stages=max_stages,
        converged=error is None,
    )
    for i in (results.extract, results.raffinate, results.residuals): i.flags.writeable = False
    if error is not None:
        error.results = results
        raise error from None
    return results

def counter_current_stages(Ro, Eo, ySo, yDo, xSo, xDo, degree,
                           yS_eq, xS_eq, yD_eq, xD_eq, xSn, max_stages=None):
    """
    Return the StageResults of a liquid-liquid counter-current extraction
    given flow rates, feed compositions and equilibrium data as plain numbers
    and sequences.

    Parameters
    ----------
    Ro, Eo : float
        Raffinate and extract feed flow rates [kg/hr].
    ySo, yDo : float
        Solute and solvent mass fractions of the extract feed.
    xSo, xDo : float
        Solute and solvent mass fractions of the raffinate feed.
    degree : int
        Degree of the equilibrium polynomials.
    yS_eq, xS_eq : Iterable[float]
        Equilibrium solute mass fractions in the extract and raffinate phases.
    yD_eq, xD_eq : Iterable[float]
        Equilibrium solvent mass fractions in the extract and raffinate phases.
    xSn : float
        Target solute mass fraction of the final raffinate.
    max_stages : int, optional

    """
    return solve_counter_current_extraction(
        FeedStream.from_fractions(Ro, xSo, xDo),
        FeedStream.from_fractions(Eo, ySo, yDo),
        EquilibriumData(xS_eq, xD_eq, yS_eq, yD_eq),
        xSn, degree, max_stages,
    )
