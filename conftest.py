# -*- coding: utf-8 -*-
"""
Configuration for pytest to run without user preferences and with a 
non-interactive plotting backend.
"""
import os

def pytest_ignore_collect(collection_path):
    if 'setup' in str(collection_path):
        return True

def pytest_configure(config):
    os.environ["DISABLE_PREFERENCES"] = "1"
    os.environ["MPLBACKEND"] = "Agg"
