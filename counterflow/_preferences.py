# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
#
# This module is under the MIT license. See LICENSE.txt
# for license details.
"""
"""
import yaml
import os

__all__ = ('preferences', 'DisplayPreferences', 'TemporaryPreferences')

class DisplayPreferences:
    """
    All preferences for counterflow stage diagrams.

    Examples
    --------
    >>> from counterflow import preferences
    >>> preferences.show()
    DisplayPreferences:
    marker_size: 5
    marker_color: 'g'
    marker_edge_color: 'k'
    equilibrium_color: 'k'
    tie_line_color: '#d95319'
    pole_line_color: '#0072bd'
    mass_balance_color: 'r'
    N_curve_points: 30
    extract_label_offset: (0.0, 0.045)
    raffinate_label_offset: (0.003, -0.04)
    mixing_label_offset: (0.005, 0.01)
    pole_label_offset: (0.01, 0.01)
    feed_label_offset: 0.08

    """
    __slots__ = ('marker_size', 'marker_color', 'marker_edge_color',
                 'equilibrium_color', 'tie_line_color', 'pole_line_color',
                 'mass_balance_color', 'N_curve_points',
                 'extract_label_offset', 'raffinate_label_offset',
                 'mixing_label_offset', 'pole_label_offset',
                 'feed_label_offset')

    def __init__(self):
        #: Size of composition markers.
        self.marker_size: float = 5

        #: Fill color of composition markers.
        self.marker_color: str = 'g'

        #: Edge color of composition markers.
        self.marker_edge_color: str = 'k'

        #: Color of the raffinate and extract equilibrium curves.
        self.equilibrium_color: str = 'k'

        #: Color of the tie-lines joining extract and raffinate of each stage.
        self.tie_line_color: str = '#d95319'

        #: Color of the operating lines through the pole.
        self.pole_line_color: str = '#0072bd'

        #: Color of the overall mass balance lines (feeds and mixing point).
        self.mass_balance_color: str = 'r'

        #: Number of points used to draw each equilibrium curve.
        self.N_curve_points: int = 30

        #: Horizontal and vertical offsets of extract stage labels.
        self.extract_label_offset: tuple[float, float] = (0.0, 0.045)

        #: Horizontal and vertical offsets of raffinate stage labels.
        self.raffinate_label_offset: tuple[float, float] = (0.003, -0.04)

        #: Horizontal and vertical offsets of the mixing point label.
        self.mixing_label_offset: tuple[float, float] = (0.005, 0.01)

        #: Horizontal and vertical offsets of the pole label.
        self.pole_label_offset: tuple[float, float] = (0.01, 0.01)

        #: Vertical distance between feed markers and their labels.
        self.feed_label_offset: float = 0.08

    def temporary(self):
        """Return a TemporaryPreferences object that will revert back to original
        preferences after context management."""
        return TemporaryPreferences()

    def reset(self, save=False):
        """Reset to counterflow defaults."""
        self.__init__()
        if save: self.save()

    def update(self, *, save=False, **kwargs):
        for i, j in kwargs.items():
            if i.endswith('offset') and not isinstance(j, (int, float)): j = tuple(j)
            setattr(self, i, j)
        if save: self.save()

    @staticmethod
    def file():
        folder = os.path.dirname(__file__)
        return os.path.join(folder, 'preferences.yaml')

    def autoload(self):
        with open(self.file(), 'r') as stream:
            data = yaml.safe_load(stream)
            assert isinstance(data, dict), 'yaml file must return a dict'
        self.update(**data)

    def to_dict(self):
        """Return dictionary of all preferences."""
        return {i: getattr(self, i) for i in self.__slots__}

    def save(self):
        """Save preferences."""
        dct = self.to_dict()
        for i, j in dct.items():
            if isinstance(j, tuple): dct[i] = list(j)
        with open(self.file(), 'w') as file:
            yaml.safe_dump(dct, file)

    def show(self):
        """Print all specifications."""
        dct = self.to_dict()
        print(f'{type(self).__name__}:\n' + '\n'.join([f"{i}: {repr(j)}" for i, j in dct.items()]))
    _ipython_display_ = show


class TemporaryPreferences:

    def __enter__(self):
        self.__dict__.update(preferences.to_dict())
        return preferences

    def __exit__(self, type, exception, traceback):
        preferences.update(**self.__dict__)

#:
preferences: DisplayPreferences = DisplayPreferences()

if os.environ.get("FILTER_WARNINGS"):
    from warnings import filterwarnings; filterwarnings('ignore')
if not os.environ.get("DISABLE_PREFERENCES") == "1" and os.path.exists(preferences.file()):
    preferences.autoload()
