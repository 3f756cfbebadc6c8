"""
Content publishing, catalog and taxonomy apps for the chemical trading storefront.
"""
__version__ = "0.1.0"
