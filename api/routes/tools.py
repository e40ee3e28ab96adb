"""Password tools endpoints.

Public endpoints for password generation and checking.
"""

from fastapi import APIRouter, HTTPException

from api.models import (
    PasswordGenerateRequest,
    PasswordGenerateResponse,
    PasswordCheckRequest,
    PasswordCheckResponse,
    StrengthLevelInfo,
)
from core import ConfigurationError, StrengthLevel, build_character_set, generate_password
from password_checker import (
    LEVEL_THRESHOLDS,
    color_for_level,
    label_for_level,
    score_strength,
)


router = APIRouter(tags=["Password Tools"])


@router.post("/generate", response_model=PasswordGenerateResponse)
async def generate_new_password(request: PasswordGenerateRequest):
    """Generate a secure random password and score it."""
    config = request.to_config()
    try:
        password = generate_password(config)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    report = score_strength(password)

    return PasswordGenerateResponse(
        password=password,
        length=len(password),
        charset_size=len(build_character_set(config)),
        strength=report,
        label=label_for_level(report.level),
        color=color_for_level(report.level),
    )


@router.post("/check", response_model=PasswordCheckResponse)
async def check_password(request: PasswordCheckRequest):
    """Score the strength of a password."""
    report = score_strength(request.password)

    return PasswordCheckResponse(
        **report.model_dump(),
        label=label_for_level(report.level),
        color=color_for_level(report.level),
    )


@router.get("/levels", response_model=list[StrengthLevelInfo])
async def list_levels():
    """List strength levels with their labels, colours and minimum scores."""
    minimums = {level: minimum for minimum, level in LEVEL_THRESHOLDS}

    return [
        StrengthLevelInfo(
            level=level,
            label=label_for_level(level),
            color=color_for_level(level),
            min_score=minimums.get(level, 0),
        )
        for level in StrengthLevel
    ]
