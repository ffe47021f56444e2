# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module contains graphical representations of stage calculations and
sensitivity sweeps. Plots only consume results; nothing is computed here
that feeds back into the solver.

"""
import numpy as np
import matplotlib.pyplot as plt
from ._preferences import preferences

__all__ = ('plot_stages', 'plot_sweep')

def plot_marker(ax, point, label=None, offset=(0., 0.)):
    ax.plot(*point, 'o', markersize=preferences.marker_size,
            markerfacecolor=preferences.marker_color,
            markeredgecolor=preferences.marker_edge_color)
    if label is not None:
        dx, dy = offset
        ax.text(point[0] + dx, point[1] + dy, label)

def plot_line(ax, a, b, color):
    ax.plot([a[0], b[0]], [a[1], b[1]], color=color)

def plot_stages(results, xS_max=None, ax=None):
    """
    Plot equilibrium curves, stage tie-lines, pole construction lines and
    feed, mixing, pole and target markers of a counter-current stage
    calculation on solvent vs. solute mass fraction axes.

    Parameters
    ----------
    results : StageResults
    xS_max : float, optional
        Upper limit of solute fractions used to draw the equilibrium curves.
        Defaults to the largest stage or feed solute fraction.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. Defaults to a new figure.

    Returns
    -------
    ax : matplotlib.axes.Axes

    """
    if ax is None: ax = plt.figure().gca()
    curves = results.curves
    E = results.extract
    R = results.raffinate
    pole = results.pole.composition
    M = results.mixing_point.composition
    raffinate_feed = results.raffinate_feed.composition
    extract_feed = results.extract_feed.composition
    target = results.target
    N = results.N_stages
    if xS_max is None:
        xS_max = max(E[:, 0].max(), R[:, 0].max(), raffinate_feed.solute)

    # Equilibrium curves
    x = np.linspace(0, xS_max, preferences.N_curve_points)
    color = preferences.equilibrium_color
    ax.plot(x, curves.raffinate_solvent(x), color=color)
    ax.plot(x, curves.extract_solvent(x), color=color)
    ax.set_xlabel('$y_S$ , $x_S$')
    ax.set_ylabel('$y_D$ , $x_D$')
    Ro = results.raffinate_feed.flow
    Eo = results.extract_feed.flow
    ax.set_title(f'Graphical view of stage calculation, $R_o$ = {Ro:.4g}  '
                 f'$E_o$ = {Eo:.4g} [kg/h]')

    # Stage tie-lines
    for i in range(N): plot_line(ax, E[i], R[i], preferences.tie_line_color)

    # Operating lines through the pole
    color = preferences.pole_line_color
    if pole.solvent <= 1:
        for i in range(N): plot_line(ax, pole, E[i], color)
    else:
        # Pole beyond the diagram; draw toward the feed and raffinates
        for i in range(N):
            plot_line(ax, pole, raffinate_feed, color)
            plot_line(ax, pole, R[i], color)

    # Overall mass balance lines
    color = preferences.mass_balance_color
    plot_line(ax, target, E[0], color)
    plot_line(ax, extract_feed, raffinate_feed, color)

    # Markers and labels
    offset = preferences.feed_label_offset
    plot_marker(ax, pole, r'$\Delta$ (POLE)', preferences.pole_label_offset)
    plot_marker(ax, M, 'M', preferences.mixing_label_offset)
    plot_marker(ax, raffinate_feed, '$R_o$', (0., -offset))
    plot_marker(ax, extract_feed, '$E_o$', (0., offset))
    for i in range(N):
        plot_marker(ax, R[i], f'$R_{{{i + 1}}}$', preferences.raffinate_label_offset)
        plot_marker(ax, E[i], f'$E_{{{i + 1}}}$', preferences.extract_label_offset)
    ax.plot(*target, '^', markersize=preferences.marker_size,
            markerfacecolor=preferences.mass_balance_color,
            markeredgecolor=preferences.marker_edge_color)
    return ax

#: Axis labels of sweep columns.
sweep_labels = {
    'Stages': 'Number of equilibrium stages required for the desired separation',
    'Final raffinate solute': 'Solute mass fraction in $R_n$',
    'First extract solute': 'Solute mass fraction in $E_1$',
}

def plot_sweep(table, column='Stages', ax=None):
    """
    Plot a sensitivity sweep column against the raffinate feed flow rate.

    Parameters
    ----------
    table : pandas.DataFrame
        Sweep table as returned by :func:`counterflow.sweep_raffinate_feed_flow`.
    column : str, optional
        Column to plot. Defaults to 'Stages'.
    ax : matplotlib.axes.Axes, optional

    """
    if column not in sweep_labels:
        raise ValueError(f"column must be one of {list(sweep_labels)}, not {column!r}")
    if ax is None: ax = plt.figure().gca()
    y = table[column].astype(float)
    ax.plot(table.index.values, y.values)
    ax.set_xlabel('$R_o$ mass flow rate (kg/h)')
    ax.set_ylabel(sweep_labels[column])
    return ax
