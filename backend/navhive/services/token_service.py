import enum
import hmac
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from navhive.config import AuthConfig, get_settings
from navhive.schemas.auth import LoginResponse, TokenClaims
from navhive.utils import token_codec
from navhive.utils.token_codec import MalformedToken

logger = logging.getLogger(__name__)

TOKEN_LIFETIME_SECONDS = 24 * 60 * 60
GUEST_IDENTITY = "guest"
LOGIN_FAILED_MESSAGE = "Invalid username or password"


class TokenStatus(enum.StrEnum):
    valid = "valid"
    malformed = "malformed"
    bad_signature = "bad_signature"
    expired = "expired"


@dataclass(frozen=True)
class TokenVerification:
    status: TokenStatus
    claims: TokenClaims | None = None

    @property
    def valid(self) -> bool:
        return self.status is TokenStatus.valid


class TokenService:
    """
    Mints and checks bearer tokens for the single configured account.

    Holds no mutable state: the config is frozen and the clock is only read,
    so one instance is shared by all requests.
    """

    def __init__(self, config: AuthConfig, clock: Callable[[], float] = time.time):
        self.config = config
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    def issue(self, identity: str) -> str:
        now = self._now()
        claims = TokenClaims(
            subject=identity,
            issued_at=now,
            expires_at=now + TOKEN_LIFETIME_SECONDS,
        )
        return token_codec.encode(claims, self.config.secret)

    def verify(self, token: str) -> TokenVerification:
        try:
            decoded = token_codec.decode(token)
        except MalformedToken as e:
            logger.info("Rejected malformed token: %s", e)
            return TokenVerification(TokenStatus.malformed)

        expected_tag = token_codec.sign(
            decoded.header_segment, decoded.claims_segment, self.config.secret
        )
        if not hmac.compare_digest(
            expected_tag.encode("ascii"), decoded.tag_segment.encode("ascii")
        ):
            logger.info("Rejected token with bad signature for subject %r", decoded.claims.subject)
            return TokenVerification(TokenStatus.bad_signature)

        if decoded.claims.expires_at <= self._now():
            logger.info("Rejected expired token for subject %r", decoded.claims.subject)
            return TokenVerification(TokenStatus.expired)

        return TokenVerification(TokenStatus.valid, decoded.claims)

    def login(self, username: str | None, password: str | None) -> LoginResponse:
        if not self.config.enabled:
            return LoginResponse(
                success=True,
                token=self.issue(GUEST_IDENTITY),
                message="Authentication is disabled, signed in as guest",
            )

        # Evaluate both so timing does not reveal which one was wrong
        username_ok = hmac.compare_digest(
            (username or "").encode("utf-8"), self.config.username.encode("utf-8")
        )
        password_ok = hmac.compare_digest(
            (password or "").encode("utf-8"), self.config.password.encode("utf-8")
        )
        if username_ok and password_ok:
            logger.info("User %r logged in", username)
            return LoginResponse(success=True, token=self.issue(username), message="Login successful")

        logger.warning("Failed login attempt")
        return LoginResponse(success=False, message=LOGIN_FAILED_MESSAGE)


@lru_cache
def get_token_service() -> TokenService:
    return TokenService(get_settings().auth_config())
