"""
dbcopy - one-shot MongoDB database copy.

Clears each non-system collection on the destination, recreates the source
indexes and streams every document across.
"""
__version__ = "0.1.0"
