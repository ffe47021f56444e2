# -*- coding: utf-8 -*-
# counterflow: Counter-current liquid-liquid extraction stage calculations
# Copyright (C) 2024, counterflow developers
# 
# This module is under the MIT license. See LICENSE.txt
# for license details.
from setuptools import setup

setup(
    name='counterflow',
    packages=['counterflow'],
    license='MIT',
    version='0.1.0',
    description='Equilibrium stages of liquid-liquid counter-current extraction by the pole method',
    long_description=open('README.rst', encoding='utf-8').read(),
    author='counterflow developers',
    install_requires=['numpy>=1.21',
                      'scipy>=1.7',
                      'pandas>=1.3',
                      'matplotlib>=3.4',
                      'pyyaml'],
    extras_require={ 
        'dev': [
            'pytest',
            'pytest-cov',
        ]
    }, 
    exclude_package_data={
        'counterflow': ['preferences.yaml'],
    },
    python_requires='>=3.9',
    platforms=['Windows', 'Mac', 'Linux'],
    classifiers=['License :: OSI Approved :: MIT License',
                 'Development Status :: 3 - Alpha',
                 'Environment :: Console',
                 'Topic :: Scientific/Engineering',
                 'Topic :: Scientific/Engineering :: Chemistry',
                 'Topic :: Scientific/Engineering :: Mathematics',
                 'Intended Audience :: Developers',
                 'Intended Audience :: Education',
                 'Intended Audience :: Science/Research',
                 'Natural Language :: English',
                 'Operating System :: MacOS',
                 'Operating System :: Microsoft :: Windows',
                 'Operating System :: POSIX :: Linux',
                 'Programming Language :: Python :: 3.9',
                 'Programming Language :: Python :: 3.10',
                 'Programming Language :: Python :: Implementation :: CPython',
                 'Topic :: Education'],
    keywords=['liquid-liquid extraction', 'counter-current', 'equilibrium stages', 'pole method', 'mass balance', 'phase equilibrium'],
)
