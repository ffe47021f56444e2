# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
Reference equilibrium data (mass fractions) and feed specifications of a
liquid-liquid extraction of a solute from its carrier with a pure solvent.

Examples
--------
>>> from counterflow import solve_counter_current_extraction
>>> from counterflow.examples import *
>>> results = solve_counter_current_extraction(
...     raffinate_feed(), extract_feed(), reference_data(), xSn
... )
>>> bool(results.raffinate[-1, 0] <= xSn)
True

"""
from ._streams import FeedStream
from ._equilibrium import EquilibriumData

__all__ = ('reference_data', 'raffinate_feed', 'extract_feed', 'xSn')

# Raffinate phase equilibrium data (x_S vs x_D)
xS_eq = (0.0596, 0.1397, 0.1905, 0.2300, 0.2692, 0.2763, 0.3088, 0.3573,
         0.4090, 0.4605, 0.5178, 0.5800)
xD_eq = (0.0052, 0.0068, 0.0079, 0.0100, 0.0102, 0.0104, 0.0117, 0.0160,
         0.0210, 0.0375, 0.0652, 0.1460)

# Extract phase equilibrium data (y_S vs y_D)
yS_eq = (0.0875, 0.2078, 0.2766, 0.3706, 0.3852, 0.3939, 0.4297, 0.4821,
         0.5395, 0.5740, 0.6034, 0.5800)
yD_eq = (0.9093, 0.7832, 0.7101, 0.6085, 0.5921, 0.5821, 0.5392, 0.4757,
         0.4000, 0.3370, 0.2626, 0.1460)

#: Target solute mass fraction in the final raffinate.
xSn = 0.06

def reference_data():
    """Return the reference tie-line data."""
    return EquilibriumData(xS_eq, xD_eq, yS_eq, yD_eq)

def raffinate_feed(flow=200.):
    """Return the reference raffinate feed (solute in its carrier, no solvent)."""
    return FeedStream.from_fractions(flow, solute=0.45, solvent=0.)

def extract_feed(flow=400.):
    """Return the reference extract feed (pure solvent)."""
    return FeedStream.from_fractions(flow, solute=0., solvent=1.)
