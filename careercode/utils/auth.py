from typing import Any, Dict

from fastapi import Depends, Request

from careercode.utils.errors import Forbidden
from careercode.utils.security import COOKIE_NAME, TokenService


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


async def verify_token(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Reject the request unless its `token` cookie verifies.

    The decoded identity is stored on `request.state.decoded` and returned, so
    handlers only ever run with a verified identity.
    """
    token = request.cookies.get(COOKIE_NAME)
    decoded = tokens.verify(token)
    request.state.decoded = decoded
    return decoded


def authorize_ownership(decoded_email: Any, requested_email: Any) -> None:
    # Exact, case-sensitive match: a valid token only unlocks its own records.
    if decoded_email != requested_email:
        raise Forbidden()
