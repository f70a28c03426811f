# -*- coding: utf-8 -*-
"""
Immutable game-state engine for a 2048-style puzzle with obstacles.
"""

__version__ = "1.0.0"
