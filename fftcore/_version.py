"""Version information for the fftcore package."""

__version__ = "0.3.0"
