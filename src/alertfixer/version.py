"""
Central version constant for AlertFixer.
"""

__version__ = "1.0.0"
