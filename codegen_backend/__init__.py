"""
Backend package: Flask API cho code generator.
"""

from .app import create_app

__all__ = ['create_app']
