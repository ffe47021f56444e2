# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
# 
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
"""
import pytest
import counterflow as cf
from counterflow.exceptions import InfeasibleRegion
from numpy.testing import assert_allclose

def test_operating_line():
    assert_allclose(cf.operating_line((0., 1.), (0.5, 0.)), (-2., 1.))
    assert_allclose(cf.operating_line((0.2, 0.1), (0.4, 0.5)), (2., -0.3))
    with pytest.raises(InfeasibleRegion):
        cf.operating_line((0.2, 0.1), (0.2, 0.5))

def test_intersection_within_bracket():
    curve = lambda x: 1. - x
    intersection = cf.intersect_equilibrium_curve(curve, (0., 0.), (1., 1.), (0., 1.))
    assert_allclose(intersection.solute, 0.5, rtol=1e-6)
    assert_allclose(intersection.solvent, 0.5, rtol=1e-6)
    assert intersection.residual < 1e-12
    
    # Quadratic curve against a steep line
    curve = lambda x: 0.95 - 0.4 * x - 1.2 * x * x
    intersection = cf.intersect_equilibrium_curve(curve, (0.06, 0.), (0.16, 0.7), (0., 1.))
    x = intersection.solute
    assert_allclose(curve(x), 7. * (x - 0.06), atol=1e-7)
    
def test_intersection_outside_bracket():
    curve = lambda x: 1. - x
    intersection = cf.intersect_equilibrium_curve(curve, (0., 2.), (1., 3.), (0., 1.))
    assert_allclose(intersection.solute, 0., atol=1e-4)
    assert intersection.residual > 0.9
    
def test_empty_bracket():
    curve = lambda x: 1. - x
    intersection = cf.intersect_equilibrium_curve(curve, (0., 0.), (1., 1.), (0.2, 0.2))
    assert intersection.solute == 0.2
    assert_allclose(intersection.residual, 0.6 ** 2)
    
    
if __name__ == '__main__':
    test_operating_line()
    test_intersection_within_bracket()
    test_intersection_outside_bracket()
    test_empty_bracket()
