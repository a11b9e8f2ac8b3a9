"""Odds representation and conversion engine.

Normalizes betting odds supplied as decimal, fractional or moneyline values
into canonical decimal odds and renders them back in any notation.
"""

__version__ = "0.1.0"
