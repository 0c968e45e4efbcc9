"""Panda Loterias bet-input engine."""

__version__ = "0.1.0"
