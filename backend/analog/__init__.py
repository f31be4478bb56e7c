"""
analog - MongoDB store for blockchain event-watch targets.
"""

__version__ = "0.1.0"
