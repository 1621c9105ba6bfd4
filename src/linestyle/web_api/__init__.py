"""
linestyle Web API
=================
FastAPI adapter that checks files posted as lines.

Quick Start:
    uvicorn linestyle.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
