#!/usr/bin/env python3
"""
Aave Dead Liquidity Analyzer
Entry point: python -m dead_liquidity.main run
"""
from .cli import main

if __name__ == "__main__":
    main()
