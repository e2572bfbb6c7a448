"""
Core module - configuration and observability
"""

from .config import Config, BuildProfile, load_build_profile

__all__ = ['Config', 'BuildProfile', 'load_build_profile']
