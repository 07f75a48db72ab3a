"""Headless simulation of a ball-throwing arcade game: physics, levels, screens, text and sound."""

__version__ = "0.1.0"