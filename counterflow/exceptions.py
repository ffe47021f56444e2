# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
# 
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
"""
from . import _exceptions
from ._exceptions import *

__all__ = _exceptions.__all__
