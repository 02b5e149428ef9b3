"""Defaults for the birthday greeting keyword arguments"""

DEFAULT_NAME = "Beyonce"
DEFAULT_CURRENT_AGE = 31
