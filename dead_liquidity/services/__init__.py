"""Service modules"""
from .analyzer import DeadLiquidityAnalyzer

__all__ = ["DeadLiquidityAnalyzer"]
