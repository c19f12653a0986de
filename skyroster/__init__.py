"""Flight and passenger booking roster with a terminal menu and container utilities."""

__version__ = "0.1.0"