"""
Category and sub-category taxonomy management for the chemtrade catalog.
"""
__version__ = "0.1.0"
