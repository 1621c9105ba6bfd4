"""
Check Router
============
Endpoints for checking a single file posted as lines.
"""
from fastapi import APIRouter, HTTPException

from linestyle.core.config import RuleConfig
from linestyle.core.engine import scan_file
from linestyle.rules import ALL_RULE_NAMES, RULE_DESCRIPTIONS, RULE_IDS
from linestyle.web_api.config import settings
from linestyle.web_api.schemas.check import (
    CheckRequest,
    CheckResponse,
    DiagnosticOut,
    RuleOut,
)

router = APIRouter()


@router.get("/rules", response_model=list[RuleOut])
async def list_rules():
    """List every rule, in evaluation order."""
    return [
        RuleOut(name=name, rule_id=RULE_IDS[name], description=RULE_DESCRIPTIONS[name])
        for name in ALL_RULE_NAMES
    ]


@router.post("/check", response_model=CheckResponse)
async def check_file(request: CheckRequest):
    """
    Check one file.

    - **path**: file path; decides source type, exemptions and line width
    - **lines**: the file's lines, without line terminators
    - **disabled_rules**: rule names to switch off
    """
    if len(request.lines) > settings.MAX_LINES:
        raise HTTPException(
            status_code=413,
            detail=f"Too many lines: {len(request.lines)} > {settings.MAX_LINES}",
        )
    try:
        config = RuleConfig.from_disabled(request.disabled_rules)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    diagnostics = scan_file(request.path, request.lines, config)
    return CheckResponse(
        path=request.path,
        diagnostics=[
            DiagnosticOut(line=d.line, message=d.message, rule=d.rule)
            for d in diagnostics
        ],
        rendered=[d.render() for d in diagnostics],
    )
