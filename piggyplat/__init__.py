"""Entities, components, messages, player input and an animation graph for a small 3D platformer."""

__version__ = "0.1.0"