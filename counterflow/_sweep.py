# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module contains the sensitivity sweep of the number of stages over the
raffinate feed flow rate.

"""
import numpy as np
import pandas as pd
from warnings import warn
from ._exceptions import InvalidInputError, InfeasibleRegion, NonConvergenceError, FailedEvaluation
from ._streams import FeedStream
from ._stages import solve_counter_current_extraction

__all__ = ('sweep_raffinate_feed_flow', 'raffinate_flow_range')

#: Sweep table columns.
columns = ('Stages', 'Final raffinate solute', 'First extract solute')

def raffinate_flow_range(start, stop):
    """
    Return evenly spaced raffinate feed flow rates from `start` to `stop`
    (inclusive), approximately one kg/hr apart.

    Examples
    --------
    >>> raffinate_flow_range(100, 105)
    array([100.  , 101.25, 102.5 , 103.75, 105.  ])

    """
    N = int(stop - start)
    if N < 2:
        raise InvalidInputError(f'flow rate range ({start}, {stop}) is too narrow')
    return np.linspace(start, stop, N)

def sweep_raffinate_feed_flow(Ro_values, extract_feed, raffinate_composition,
                              data, xSn, degree=None, max_stages=None,
                              errors='raise'):
    """
    Solve the counter-current extraction at every raffinate feed flow rate
    and return a DataFrame of the number of stages, the final raffinate
    solute fraction and the first extract solute fraction indexed by the
    raffinate feed flow rate.

    Parameters
    ----------
    Ro_values : Iterable[float]
        Raffinate feed flow rates [kg/hr].
    extract_feed : FeedStream
    raffinate_composition : tuple[float, float]
        Solute and solvent mass fractions of the raffinate feed.
    data : EquilibriumData
    xSn : float
        Target solute mass fraction of the final raffinate.
    degree : int, optional
    max_stages : int, optional
    errors : str, optional
        If 'raise' (default), failed solves propagate. If 'coerce', failed
        solves are recorded as NaN rows and a FailedEvaluation warning is
        issued.

    """
    if errors not in ('raise', 'coerce'):
        raise ValueError(f"errors must be either 'raise' or 'coerce', not {errors!r}")
    xSo, xDo = raffinate_composition
    Ro_values = np.asarray(Ro_values, dtype=float)
    table = np.full([Ro_values.size, len(columns)], np.nan)
    for i, Ro in enumerate(Ro_values):
        raffinate_feed = FeedStream.from_fractions(Ro, xSo, xDo)
        try:
            results = solve_counter_current_extraction(
                raffinate_feed, extract_feed, data, xSn, degree, max_stages,
            )
        except (InfeasibleRegion, NonConvergenceError) as error:
            if errors == 'raise': raise
            warn(FailedEvaluation(f'[Ro = {Ro:.4g} kg/hr] {type(error).__name__}: {error}'),
                 stacklevel=2)
            continue
        table[i] = (results.N_stages,
                    results.raffinate[-1, 0],
                    results.extract[0, 0])
    df = pd.DataFrame(table, index=pd.Index(Ro_values, name='Ro [kg/hr]'),
                      columns=columns)
    df['Stages'] = df['Stages'].astype('Int64')
    return df
