"""
sigpatch - declarative signature patching for binaries.
"""

__version__ = "0.1.0"
