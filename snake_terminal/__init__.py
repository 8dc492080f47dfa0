"""
Terminal Snake: steer a growing snake around a bordered grid, eat fruit, avoid
the walls and your own tail.
"""

__version__ = "0.1.0"
