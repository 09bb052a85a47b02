import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from navhive.services.token_service import GUEST_IDENTITY, TokenService, get_token_service

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"

MISSING_CREDENTIALS_DETAIL = "Please log in"
MALFORMED_CREDENTIALS_DETAIL = "Invalid authentication credentials"
REAUTHENTICATE_DETAIL = "Authentication expired or invalid, please log in again"


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    status_code: int = status.HTTP_200_OK
    detail: str | None = None
    headers: dict[str, str] | None = None
    subject: str | None = None


class AuthGate:
    """Allow/deny decision for every gated request."""

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    def evaluate(self, authorization: str | None) -> GateDecision:
        if not self.token_service.config.enabled:
            return GateDecision(allowed=True, subject=GUEST_IDENTITY)

        if not authorization:
            return GateDecision(
                allowed=False,
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=MISSING_CREDENTIALS_DETAIL,
                headers={"WWW-Authenticate": BEARER_SCHEME},
            )

        scheme, _, token = authorization.partition(" ")
        if scheme != BEARER_SCHEME or not token:
            return GateDecision(
                allowed=False,
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=MALFORMED_CREDENTIALS_DETAIL,
            )

        verification = self.token_service.verify(token)
        if not verification.valid:
            return GateDecision(
                allowed=False,
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=REAUTHENTICATE_DETAIL,
            )

        return GateDecision(allowed=True, subject=verification.claims.subject)


def get_auth_gate(
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> AuthGate:
    return AuthGate(token_service)


async def require_auth(
    request: Request,
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> str:
    """
    Reject the request with 401 unless the gate allows it.

    On success the token subject is stored on ``request.state.subject``.
    """
    decision = gate.evaluate(request.headers.get("Authorization"))
    if not decision.allowed:
        logger.debug(f"Denied {request.method} {request.url.path}: {decision.detail}")
        raise HTTPException(
            status_code=decision.status_code,
            detail=decision.detail,
            headers=decision.headers,
        )

    request.state.subject = decision.subject
    return decision.subject


# Type alias for dependency injection
CurrentSubject = Annotated[str, Depends(require_auth)]
