"""
Vitrine - user accounts, sessions and channel views for media sharing.
"""

__version__ = "0.1.0"
