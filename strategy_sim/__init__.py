"""
Strategy Sim - Multi-Strategy Trading Signal Backtester

Replays a historical price series through several independent signal
strategies (momentum, mean reversion, a composite heuristic score and a
random baseline), simulates an all-in/all-out portfolio for each and
reports accuracy, PnL, trades and an equity curve per strategy.
"""

__version__ = "0.1.0"
__author__ = "Strategy Sim Team"
