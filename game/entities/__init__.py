"""
Game entities package.
"""
from .asteroid import Asteroid
