"""Aave dead-liquidity analyzer."""
__version__ = "0.1.0"
