"""
Game systems package.
"""
from .asteroid_gen import init, init_asteroid
from .lifecycle import split, tick
