"""Cabinet part geometry generation.

Turns a cabinet's structural parameters into a flat list of positioned,
dimensioned parts suitable for cut lists and visualization.
"""

__version__ = "0.1.0"
