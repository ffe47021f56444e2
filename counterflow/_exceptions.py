# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
# 
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module includes classes and functions relating exception handling.

"""
from warnings import warn

__all__ = ('InvalidInputError',
           'InfeasibleRegion',
           'DegeneratePoleError',
           'NonConvergenceError',
           'IntersectionWarning',
           'FailedEvaluation',
           'residual_warning')

# %% Counterflow errors

class InvalidInputError(ValueError):
    """ValueError regarding specifications rejected before solving."""

class InfeasibleRegion(RuntimeError):
    """RuntimeError regarding geometric constructions that are ill-defined."""
    
    def __init__(self, region, msg=None):
        self.region = region
        if msg is None: msg = f'{region} is infeasible'
        super().__init__(msg)

class DegeneratePoleError(InfeasibleRegion):
    """InfeasibleRegion regarding a pole (difference point) that cannot be constructed."""
    
    def __init__(self, msg):
        super().__init__('pole', msg)

class NonConvergenceError(RuntimeError):
    """RuntimeError regarding stage stepping that failed to reach the target.
    The partial stage results are kept for diagnostics."""
    
    def __init__(self, msg, results=None):
        self.results = results
        super().__init__(msg)

# %% Counterflow warnings

class IntersectionWarning(RuntimeWarning):
    """RuntimeWarning regarding a poor intersection between an equilibrium 
    curve and an operating line."""
    
class FailedEvaluation(RuntimeWarning):
    """RuntimeWarning regarding failed sweep evaluation."""

# %% Residual checking

def residual_warning(stage, residual, tolerance, stacklevel=3):
    """Issue an IntersectionWarning if the residual is above tolerance.
    
    Parameters
    ----------
    stage : int
        Stage number where the intersection was located.
    residual : float
        Squared vertical gap between curve and line at the located point.
    tolerance : float
        Maximum acceptable residual.
    
    """
    if residual > tolerance:
        msg = (f"stage {stage} intersection residual ({residual:.3g}) is above "
               f"tolerance ({tolerance:.3g}); the operating line may not cross "
               "the equilibrium curve within the search bracket")
        warn(IntersectionWarning(msg), stacklevel=stacklevel)
