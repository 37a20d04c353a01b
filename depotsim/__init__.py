"""Discrete-event simulation of packages moving between warehouses."""

__version__ = "0.1.0"