"""
Check Schemas
=============
Request and response models for the check endpoints.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CheckRequest(BaseModel):
    """Request to check a single file"""

    path: str = Field(..., description="File path, e.g. src/main/java/Foo.java")
    lines: List[str] = Field(default_factory=list, description="Lines without terminators")
    disabled_rules: List[str] = Field(default_factory=list, description="Rule names to switch off")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "path": "src/main/java/Foo.java",
                "lines": ["class Foo {", "}", "// End Foo.java"],
                "disabled_rules": ["tabs"],
            }
        }
    )


class DiagnosticOut(BaseModel):
    """One style violation"""

    line: int
    message: str
    rule: str


class RuleOut(BaseModel):
    """A rule the engine can run"""

    name: str
    rule_id: str
    description: str


class CheckResponse(BaseModel):
    """Diagnostics for one file, in discovery order"""

    path: str
    diagnostics: List[DiagnosticOut] = Field(default_factory=list)
    rendered: List[str] = Field(default_factory=list)
