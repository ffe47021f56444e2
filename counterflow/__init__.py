# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
.. contents:: :local:

.. autodata:: settings
.. autodata:: preferences

"""
from __future__ import annotations
__version__ = '0.1.0'

# %% Initialize counterflow

from . import _settings
from ._settings import *
from . import _preferences
from ._preferences import *
from . import exceptions
from . import _streams
from ._streams import *
from . import _equilibrium
from ._equilibrium import *
from . import _intersection
from ._intersection import *
from . import _stages
from ._stages import *
from . import _sweep
from ._sweep import *
from . import plots
from . import examples

__all__ = (
    'settings', 'preferences', 'exceptions', 'plots', 'examples',
    *_streams.__all__, *_equilibrium.__all__, *_intersection.__all__,
    *_stages.__all__, *_sweep.__all__,
)
