"""
lazylog - scan log files and pretty print the JSON embedded in their lines.
"""

__version__ = "0.1.0"
