"""
Test Utilities
==============

Common utilities and helpers for testing.
"""

from .data_generators import *
from .helpers import *
