# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module contains the composition and feed stream data classes, as well
as the overall mass balance that locates the mixing point.

Compositions are pairs of mass fractions of solute and solvent; the balance
of the stream (the carrier or "inert" component) is implied and not tracked.

"""
from math import isfinite
from typing import NamedTuple
from ._exceptions import InvalidInputError

__all__ = ('Composition', 'FeedStream', 'MixingPoint', 'mixing_point')

class Composition(NamedTuple):
    solute: float #: Solute mass fraction
    solvent: float #: Solvent mass fraction

    @classmethod
    def mix(cls, F1, z1, F2, z2):
        """Return the flow weighted average of two compositions.
        Negative flow rates subtract a stream (difference points)."""
        F = F1 + F2
        return cls((F1 * z1[0] + F2 * z2[0]) / F,
                   (F1 * z1[1] + F2 * z2[1]) / F)


class FeedStream(NamedTuple):
    flow: float #: Mass flow rate [kg/hr]
    composition: Composition #: Solute and solvent mass fractions

    @classmethod
    def from_fractions(cls, flow, solute, solvent):
        return cls(float(flow), Composition(float(solute), float(solvent)))

    @property
    def solute(self):
        return self.composition.solute

    @property
    def solvent(self):
        return self.composition.solvent

    def check(self, name):
        """Raise an InvalidInputError if the flow rate is not finite and positive."""
        if not (isfinite(self.flow) and self.flow > 0.):
            raise InvalidInputError(
                f"{name} flow rate must be finite and positive, not {self.flow!r}"
            )


class MixingPoint(NamedTuple):
    flow: float #: Total mass flow rate of both feeds [kg/hr]
    composition: Composition #: Flow weighted average composition


def mixing_point(raffinate_feed, extract_feed):
    """
    Return the mixing point of the raffinate and extract feeds.

    Examples
    --------
    >>> from counterflow import FeedStream, mixing_point
    >>> Ro = FeedStream.from_fractions(200, solute=0.45, solvent=0.)
    >>> Eo = FeedStream.from_fractions(400, solute=0., solvent=1.)
    >>> M = mixing_point(Ro, Eo)
    >>> M.flow
    600.0
    >>> round(M.composition.solute, 4), round(M.composition.solvent, 4)
    (0.15, 0.6667)

    """
    Ro, xo = raffinate_feed
    Eo, yo = extract_feed
    return MixingPoint(Ro + Eo, Composition.mix(Ro, xo, Eo, yo))
