"""Hydroelectric power system simulation with rain, plant management and blackouts."""

__version__ = "0.1.0"