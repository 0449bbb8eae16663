"""
Utility functions module.

Time conversion helpers shared by the price feed, the data parsers and the
results store. Timestamps inside the simulator are always timezone-aware
UTC datetimes; unix seconds only appear at the provider boundary.
"""
