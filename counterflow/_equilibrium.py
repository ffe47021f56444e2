# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
This module contains the experimental equilibrium (tie-line) dataset and the
polynomial equilibrium correlations fitted to it.

"""
import numpy as np
from typing import NamedTuple
from ._exceptions import InvalidInputError
from ._settings import settings
from ._streams import Composition

__all__ = ('EquilibriumData', 'EquilibriumCurves')

def as_readonly_array(values, name):
    array = np.array(values, dtype=float)
    if array.ndim != 1:
        raise InvalidInputError(f"{name} must be a 1-d sequence of mass fractions")
    if not np.isfinite(array).all():
        raise InvalidInputError(f"{name} must contain only finite mass fractions")
    array.flags.writeable = False
    return array


class EquilibriumData:
    """
    Create an EquilibriumData object that holds tie-line data as parallel
    mass fraction arrays. Each index is one tie-line: the raffinate
    composition in equilibrium with the extract composition.

    Parameters
    ----------
    raffinate_solute : Iterable[float]
        Solute mass fractions in the raffinate phase.
    raffinate_solvent : Iterable[float]
        Solvent mass fractions in the raffinate phase.
    extract_solute : Iterable[float]
        Solute mass fractions in the extract phase.
    extract_solvent : Iterable[float]
        Solvent mass fractions in the extract phase.

    """
    __slots__ = ('raffinate_solute', 'raffinate_solvent',
                 'extract_solute', 'extract_solvent')

    def __init__(self, raffinate_solute, raffinate_solvent,
                 extract_solute, extract_solvent):
        names = self.__slots__
        arrays = [as_readonly_array(i, j) for i, j in zip(
            (raffinate_solute, raffinate_solvent, extract_solute, extract_solvent),
            names
        )]
        sizes = {i.size for i in arrays}
        if len(sizes) != 1:
            lengths = ', '.join([f"{i}={j.size}" for i, j in zip(names, arrays)])
            raise InvalidInputError(f"equilibrium data lengths do not match ({lengths})")
        for i, j in zip(names, arrays): object.__setattr__(self, i, j)

    def __setattr__(self, name, value):
        raise AttributeError(f"can't set attribute; {type(self).__name__!r} object is immutable")

    @property
    def size(self):
        """Number of tie-lines."""
        return self.raffinate_solute.size

    def __len__(self):
        return self.size

    def check_degree(self, degree):
        """Raise an InvalidInputError if the data cannot support a
        polynomial fit of the given degree."""
        if isinstance(degree, bool) or not isinstance(degree, (int, np.integer)):
            raise InvalidInputError(f"polynomial degree must be an integer, not {degree!r}")
        if degree < 1:
            raise InvalidInputError(f"polynomial degree must be at least 1, not {degree}")
        if self.size < degree + 1:
            raise InvalidInputError(
                f"a polynomial of degree {degree} requires at least {degree + 1} "
                f"tie-lines; only {self.size} given"
            )

    def fit(self, degree=None):
        """Return EquilibriumCurves fitted by least-squares regression."""
        return EquilibriumCurves.fit(self, degree)

    def __repr__(self):
        return f"<{type(self).__name__}: {self.size} tie-lines>"


class EquilibriumCurves(NamedTuple):
    """
    Polynomial equilibrium correlations. Coefficients are ordered from the
    highest power, as in :func:`numpy.polyval`.

    Examples
    --------
    >>> from counterflow import EquilibriumData
    >>> data = EquilibriumData([0.1, 0.2, 0.3], [0.01, 0.02, 0.03],
    ...                        [0.2, 0.4, 0.6], [0.8, 0.6, 0.4])
    >>> curves = data.fit(1)
    >>> round(float(curves.raffinate_solute(0.5)), 6)
    0.25

    """
    raffinate: np.ndarray #: Raffinate solute -> raffinate solvent
    extract: np.ndarray #: Extract solute -> extract solvent
    equilibrium: np.ndarray #: Extract solute -> raffinate solute

    @classmethod
    def fit(cls, data, degree=None):
        if degree is None: degree = settings.polynomial_degree
        data.check_degree(degree)
        xS = data.raffinate_solute
        xD = data.raffinate_solvent
        yS = data.extract_solute
        yD = data.extract_solvent
        coefficients = [np.polyfit(x, y, degree) for x, y in
                        ((xS, xD), (yS, yD), (yS, xS))]
        for i in coefficients: i.flags.writeable = False
        return cls(*coefficients)

    @property
    def degree(self):
        return self.raffinate.size - 1

    def raffinate_solvent(self, xS):
        """Return the solvent fraction of the raffinate phase at the given solute fraction."""
        return np.polyval(self.raffinate, xS)

    def extract_solvent(self, yS):
        """Return the solvent fraction of the extract phase at the given solute fraction."""
        return np.polyval(self.extract, yS)

    def raffinate_solute(self, yS):
        """Return the raffinate solute fraction in equilibrium with the
        extract solute fraction."""
        return np.polyval(self.equilibrium, yS)

    def raffinate_composition(self, xS):
        return Composition(float(xS), float(self.raffinate_solvent(xS)))

    def extract_composition(self, yS):
        return Composition(float(yS), float(self.extract_solvent(yS)))
