"""Headless game simulations: platformer physics, particle emitters and small classic games."""

__version__ = "0.1.0"