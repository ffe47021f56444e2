# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
# 
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
"""
import pytest
import numpy as np
import counterflow as cf
from counterflow import examples
from counterflow.exceptions import (
    InvalidInputError, InfeasibleRegion, DegeneratePoleError,
    NonConvergenceError, IntersectionWarning,
)
from numpy.testing import assert_allclose, assert_array_equal

def linear_data():
    # Extract: yD = 1 - yS; raffinate: xD = 0; equilibrium: xS = yS / 2
    return cf.EquilibriumData(
        raffinate_solute=[0.05, 0.1, 0.15, 0.2],
        raffinate_solvent=[0., 0., 0., 0.],
        extract_solute=[0.1, 0.2, 0.3, 0.4],
        extract_solvent=[0.9, 0.8, 0.7, 0.6],
    )

def solve_linear(Eo, **kwargs):
    return cf.solve_counter_current_extraction(
        raffinate_feed=cf.FeedStream.from_fractions(100, solute=0.4, solvent=0.),
        extract_feed=cf.FeedStream.from_fractions(Eo, solute=0., solvent=1.),
        data=linear_data(), xSn=0.05, degree=1, **kwargs
    )

def solve_reference(Ro=200., **kwargs):
    return cf.solve_counter_current_extraction(
        examples.raffinate_feed(Ro), examples.extract_feed(400.),
        examples.reference_data(), examples.xSn, **kwargs
    )

def test_mixing_point_closure():
    rng = np.random.default_rng(0)
    for i in range(20):
        Ro, Eo = rng.uniform(1., 1000., 2)
        xSo, xDo, ySo, yDo = rng.uniform(0., 1., 4)
        M = cf.mixing_point(cf.FeedStream.from_fractions(Ro, xSo, xDo),
                            cf.FeedStream.from_fractions(Eo, ySo, yDo))
        assert_allclose(M.flow, Ro + Eo)
        assert_allclose(M.flow * M.composition.solute, Ro * xSo + Eo * ySo, rtol=1e-12)
        assert_allclose(M.flow * M.composition.solvent, Ro * xDo + Eo * yDo, rtol=1e-12)

def test_linear_system_stages():
    results = solve_linear(100.)
    assert results.converged
    assert results.N_stages == 2
    assert results.max_stages == cf.settings.max_stages
    assert_allclose(results.mixing_point.composition, [0.2, 0.5])
    assert_allclose(results.target, [0.05, 0.], atol=1e-12)
    assert_allclose(results.first_extract_flow, 2600 / 19, rtol=1e-6)
    assert_allclose(results.final_raffinate_flow, 1200 / 19, rtol=1e-6)
    assert_allclose(results.pole.flow, 700 / 19, rtol=1e-6)
    assert_allclose(results.pole.composition, [-3 / 35, 19 / 7], rtol=1e-6)
    yS2 = 264 / 4539
    assert_allclose(
        results.extract, 
        [[7 / 26, 19 / 26],
         [yS2, 1 - yS2]],
        rtol=1e-6,
    )
    assert_allclose(
        results.raffinate, 
        [[7 / 52, 0.],
         [yS2 / 2, 0.]],
        rtol=1e-6, atol=1e-12,
    )
    assert (results.residuals < 1e-12).all()
    
def test_negative_pole_flow():
    results = solve_linear(50.)
    assert results.converged
    assert results.N_stages == 3
    assert_allclose(results.first_extract_flow, 1650 / 19, rtol=1e-6)
    assert_allclose(results.pole.flow, -250 / 19, rtol=1e-6)
    assert_allclose(results.pole.composition, [0.24, -3.8], rtol=1e-6)
    assert_allclose(results.extract[0], [14 / 33, 19 / 33], rtol=1e-6)
    xS = results.raffinate[:, 0]
    assert (np.diff(xS) < 0).all()
    assert xS[-2] > 0.05 >= xS[-1]
    
def test_reference_scenario():
    results = solve_reference()
    assert results.converged
    assert 2 <= results.N_stages <= 130
    xS = results.raffinate[:, 0]
    assert (np.diff(xS) < 0).all()
    assert xS[-1] <= examples.xSn
    assert xS[-2] > examples.xSn
    assert np.isfinite(results.pole.composition).all()
    assert np.isfinite(results.pole.flow)
    assert_allclose(results.mixing_point.composition, [0.15, 400 / 600])
    assert results.raffinate_feed == examples.raffinate_feed(200.)
    assert results.extract_feed == examples.extract_feed(400.)
    assert_allclose(results.target.solute, examples.xSn)
    assert (results.residuals < cf.settings.residual_tolerance).all()
    
    # Extract solute fractions move toward the extract feed
    yS = results.extract[:, 0]
    assert (np.diff(yS) < 0).all()
    assert ((yS >= 0) & (yS <= 1)).all()
    
def test_repeated_solves_are_identical():
    results_a = solve_reference()
    results_b = solve_reference()
    assert results_a.N_stages == results_b.N_stages
    assert_array_equal(results_a.extract, results_b.extract)
    assert_array_equal(results_a.raffinate, results_b.raffinate)
    assert_array_equal(results_a.pole.composition, results_b.pole.composition)
    for i, j in zip(results_a.curves, results_b.curves):
        assert_array_equal(i, j)

def test_positional_interface():
    Ro = 200.
    Eo = 400.
    results = cf.counter_current_stages(
        Ro, Eo, 0., 1., 0.45, 0., 2,
        examples.yS_eq, examples.xS_eq, examples.yD_eq, examples.xD_eq,
        examples.xSn,
    )
    expected = solve_reference(Ro)
    assert results.N_stages == expected.N_stages
    assert_array_equal(results.raffinate, expected.raffinate)
    assert_array_equal(results.extract, expected.extract)
    
def test_results_table():
    results = solve_linear(50.)
    table = results.table()
    assert table.shape == (3, 5)
    assert table.index.name == 'Stage'
    assert list(table.index) == [1, 2, 3]
    assert_allclose(table['Raffinate solute'], results.raffinate[:, 0])
    assert_allclose(table['Extract solvent'], results.extract[:, 1])
    with pytest.raises(ValueError):
        results.raffinate[0, 0] = 0.
    
def test_stage_ceiling():
    with pytest.raises(NonConvergenceError) as info:
        solve_linear(50., max_stages=2)
    results = info.value.results
    assert not results.converged
    assert results.N_stages == 2
    assert results.max_stages == 2
    assert_allclose(results.raffinate[0], [7 / 33, 0.], rtol=1e-6, atol=1e-12)
    assert results.raffinate[-1, 0] > 0.05
    with cf.settings.temporary():
        cf.settings.max_stages = 2
        with pytest.raises(NonConvergenceError):
            solve_linear(50.)
    assert cf.settings.max_stages == 130
    assert solve_linear(50., max_stages=3).converged
    
def test_degenerate_pole():
    raffinate_feed = cf.FeedStream.from_fractions(100, solute=0.4, solvent=0.)
    extract_feed = cf.FeedStream.from_fractions(100, solute=0., solvent=1.)
    target = cf.Composition(0.05, 0.)
    
    # Stage 1 extract flow rate equal to the raffinate feed flow rate
    with pytest.raises(DegeneratePoleError):
        cf.construct_pole(raffinate_feed, extract_feed, target, cf.Composition(0.35, 0.65))
    
    # Stage 1 extract solute fraction equal to the target
    with pytest.raises(InfeasibleRegion):
        cf.construct_pole(raffinate_feed, extract_feed, target, cf.Composition(0.05, 0.95))
    
    # Not enough solute for the stage 1 extract to have a positive flow rate
    extract_feed = cf.FeedStream.from_fractions(1000, solute=0., solvent=1.)
    with pytest.raises(InfeasibleRegion):
        cf.construct_pole(raffinate_feed, extract_feed, target, cf.Composition(0.3, 0.7))
    
    with cf.settings.temporary():
        cf.settings.pole_flow_tolerance = 0.5
        with pytest.raises(DegeneratePoleError):
            solve_linear(100.)
    
def test_intersection_warning():
    with cf.settings.temporary():
        cf.settings.residual_tolerance = -1.
        with pytest.warns(IntersectionWarning):
            results = solve_linear(100.)
    assert results.converged

def test_non_monotonic_step():
    # Equilibrium curve turns back up at low extract solute fractions
    yS = np.array([0.05, 0.15, 0.3, 0.45, 0.6])
    data = cf.EquilibriumData(
        raffinate_solute=0.3 - yS + 2 * yS ** 2,
        raffinate_solvent=np.zeros(5),
        extract_solute=yS,
        extract_solvent=1 - yS,
    )
    with pytest.raises(NonConvergenceError) as info:
        cf.solve_counter_current_extraction(
            cf.FeedStream.from_fractions(100, solute=0.5, solvent=0.),
            cf.FeedStream.from_fractions(100, solute=0., solvent=1.),
            data, 0.12, degree=2,
        )
    assert 'did not decrease' in str(info.value)
    results = info.value.results
    assert not results.converged
    assert results.N_stages == 2
    xS = results.raffinate[:, 0]
    assert_allclose(xS[0], 0.1803, atol=1e-3)
    assert xS[1] > xS[0]
    
def test_invalid_inputs():
    raffinate_feed = examples.raffinate_feed()
    extract_feed = examples.extract_feed()
    data = examples.reference_data()
    for xSn in (0.45, 0.5, 0., -0.1, float('nan')):
        with pytest.raises(InvalidInputError):
            cf.solve_counter_current_extraction(raffinate_feed, extract_feed, data, xSn)
    for Ro, Eo in ((0., 400.), (200., -1.), (float('inf'), 400.), (200., float('nan'))):
        with pytest.raises(InvalidInputError):
            cf.solve_counter_current_extraction(
                examples.raffinate_feed(Ro), examples.extract_feed(Eo), data, 0.06,
            )
    for max_stages in (1, 2.5):
        with pytest.raises(InvalidInputError):
            cf.solve_counter_current_extraction(raffinate_feed, extract_feed, data,
                                                0.06, max_stages=max_stages)
    with pytest.raises(InvalidInputError):
        cf.solve_counter_current_extraction(raffinate_feed, extract_feed, 
                                            (examples.xS_eq, examples.xD_eq), 0.06)
    with pytest.raises(InvalidInputError):
        solve_linear(100., degree=4)


if __name__ == '__main__':
    test_mixing_point_closure()
    test_linear_system_stages()
    test_negative_pole_flow()
    test_reference_scenario()
    test_repeated_solves_are_identical()
    test_positional_interface()
    test_results_table()
    test_stage_ceiling()
    test_degenerate_pole()
    test_intersection_warning()
    test_non_monotonic_step()
    test_invalid_inputs()
