"""DSSL: daily metabolic scoring and short-term forecast calculator."""

__version__ = "0.1.0"
