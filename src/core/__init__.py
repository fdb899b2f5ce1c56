"""
Core Application Module
"""
from .config import config, get_config, ensure_directories

__all__ = ["config", "get_config", "ensure_directories"]
