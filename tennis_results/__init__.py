# tennis_results/__init__.py
"""
tennis_results package initializer.
Defines package version.
"""
__version__ = "0.1.0"
