"""Small 3D engine utilities: vectors, matrices, curves, OBJ and WAVE loading, tunable variables and particles."""

__version__ = "0.1.0"