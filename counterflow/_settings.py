# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module contains the numerical settings shared by the stage solver,
the sensitivity sweep and the plots.

"""
__all__ = ('settings', 'Settings', 'TemporarySettings')

class Settings:
    """
    Numerical settings for counter-current stage calculations.

    Examples
    --------
    >>> from counterflow import settings
    >>> settings.show()
    Settings:
    max_stages: 130
    polynomial_degree: 2
    xtol: 1e-10
    convergence_tolerance: 1e-09
    pole_flow_tolerance: 1e-09
    residual_tolerance: 1e-06

    """
    __slots__ = ('max_stages', 'polynomial_degree', 'xtol',
                 'convergence_tolerance', 'pole_flow_tolerance',
                 'residual_tolerance')

    def __init__(self):
        #: Maximum number of equilibrium stages before stage stepping is
        #: considered to have failed. Results record the value used.
        self.max_stages: int = 130

        #: Default degree of the polynomial equilibrium correlations.
        self.polynomial_degree: int = 2

        #: Absolute tolerance of the bounded scalar minimizer [mass fraction].
        self.xtol: float = 1e-10

        #: Raffinate solute fractions within this tolerance of the target
        #: are taken as converged.
        self.convergence_tolerance: float = 1e-9

        #: Pole flow rates below this fraction of the total feed flow rate
        #: are taken as degenerate.
        self.pole_flow_tolerance: float = 1e-9

        #: Intersection residuals (squared vertical gap between curve and
        #: operating line) above this value issue an IntersectionWarning.
        self.residual_tolerance: float = 1e-6

    def temporary(self):
        """Return a TemporarySettings object that will revert back to original
        settings after context management."""
        return TemporarySettings(self)

    def reset(self):
        """Reset to counterflow defaults."""
        self.__init__()

    def update(self, **kwargs):
        for i, j in kwargs.items():
            if i not in self.__slots__:
                raise AttributeError(f"{type(self).__name__!r} object has no setting {i!r}")
            setattr(self, i, j)

    def to_dict(self):
        """Return dictionary of all settings."""
        return {i: getattr(self, i) for i in self.__slots__}

    def show(self):
        """Print all settings."""
        dct = self.to_dict()
        print(f'{type(self).__name__}:\n' + '\n'.join([f"{i}: {repr(j)}" for i, j in dct.items()]))
    _ipython_display_ = show


class TemporarySettings:

    def __init__(self, settings):
        self.settings = settings
        self.data = settings.to_dict()

    def __enter__(self):
        return self.settings

    def __exit__(self, type, exception, traceback):
        self.settings.update(**self.data)

#:
settings: Settings = Settings()
