"""
Pydantic Schemas
================
Request and response models for the API.
"""
from .check import CheckRequest, CheckResponse, DiagnosticOut, RuleOut

__all__ = ["CheckRequest", "CheckResponse", "DiagnosticOut", "RuleOut"]
