"""Small worked programming exercises as reusable Python modules and commands."""

__version__ = "1.0.0"