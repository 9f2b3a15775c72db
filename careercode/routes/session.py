# ========================================
# careercode/routes/session.py - LOGIN / LOGOUT
# ========================================

from fastapi import APIRouter, Depends, Request, Response

from careercode.schemas.session import SessionIdentity, SuccessResponse
from careercode.utils.auth import get_token_service
from careercode.utils.security import COOKIE_NAME, TokenService

router = APIRouter(tags=["Session"])


# ✅ 1. ISSUE SESSION TOKEN
@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(
    identity: SessionIdentity,
    request: Request,
    response: Response,
    tokens: TokenService = Depends(get_token_service),
):
    """Sign the submitted identity and store it in the HTTP-only `token` cookie."""

    token = tokens.issue(identity.model_dump())
    response.set_cookie(
        COOKIE_NAME,
        token,
        httponly=True,
        secure=request.app.state.settings.cookie_secure,
    )
    return {"success": True}


# ✅ 2. LOGOUT
@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request, response: Response):
    """Clear the cookie. The token itself stays valid until it expires."""

    response.delete_cookie(
        COOKIE_NAME,
        httponly=True,
        secure=request.app.state.settings.cookie_secure,
    )
    return {"success": True}
