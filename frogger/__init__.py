"""Frogger - dodge the bugs, grab the gems, reach the lake."""

__version__ = "1.0.0"
