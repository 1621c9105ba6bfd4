"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import check, health

__all__ = ["check", "health"]
