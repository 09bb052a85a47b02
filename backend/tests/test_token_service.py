import pytest

from navhive.config import AuthConfig
from navhive.schemas.auth import TokenClaims
from navhive.services.token_service import (
    GUEST_IDENTITY,
    LOGIN_FAILED_MESSAGE,
    TOKEN_LIFETIME_SECONDS,
    TokenService,
    TokenStatus,
)
from navhive.utils import token_codec

NOW = 1_700_000_000


class FakeClock:
    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(auth_config: AuthConfig, clock: FakeClock) -> TokenService:
    return TokenService(auth_config, clock=clock)


class TestIssueAndVerify:
    """Tests for token issuance and verification."""

    def test_round_trip(self, service):
        token = service.issue("admin")
        result = service.verify(token)
        assert result.valid
        assert result.claims.subject == "admin"
        assert result.claims.issued_at == NOW
        assert result.claims.expires_at == NOW + TOKEN_LIFETIME_SECONDS

    def test_round_trip_arbitrary_claims(self, auth_config, clock):
        claims = TokenClaims(
            subject="someone",
            issued_at=NOW - 10,
            expires_at=NOW + 60,
            extensions={"role": "owner"},
        )
        token = token_codec.encode(claims, auth_config.secret)
        result = TokenService(auth_config, clock=clock).verify(token)
        assert result.valid
        assert result.claims == claims

    def test_tampered_claims_rejected(self, service):
        header_segment, claims_segment, tag_segment = service.issue("admin").split(".")
        for i, char in enumerate(claims_segment):
            replacement = "A" if char != "A" else "B"
            tampered = claims_segment[:i] + replacement + claims_segment[i + 1 :]
            result = service.verify(f"{header_segment}.{tampered}.{tag_segment}")
            assert not result.valid, f"tampering position {i} was accepted"

    def test_forged_subject_rejected(self, service):
        header_segment, _, tag_segment = service.issue("guest").split(".")
        forged = token_codec.encode(
            TokenClaims(subject="admin", issued_at=NOW, expires_at=NOW + 60), "wrong"
        ).split(".")[1]
        result = service.verify(f"{header_segment}.{forged}.{tag_segment}")
        assert result.status is TokenStatus.bad_signature

    def test_other_secret_rejected(self, auth_config, clock):
        other = TokenService(auth_config.model_copy(update={"secret": "other"}), clock=clock)
        result = TokenService(auth_config, clock=clock).verify(other.issue("admin"))
        assert result.status is TokenStatus.bad_signature

    def test_expired_token_rejected(self, service, clock):
        token = service.issue("admin")
        clock.now = NOW + TOKEN_LIFETIME_SECONDS
        result = service.verify(token)
        assert result.status is TokenStatus.expired
        assert result.claims is None

    def test_token_valid_until_expiry(self, service, clock):
        token = service.issue("admin")
        clock.now = NOW + TOKEN_LIFETIME_SECONDS - 1
        assert service.verify(token).valid

    def test_stray_character_in_tag_is_malformed(self, service):
        header_segment, claims_segment, tag_segment = service.issue("admin").split(".")
        result = service.verify(f"{header_segment}.{claims_segment}.{tag_segment[:5]}!{tag_segment[5:]}")
        assert result.status is TokenStatus.malformed

    def test_malformed_token_rejected(self, service):
        result = service.verify("not-a-token")
        assert result.status is TokenStatus.malformed


class TestLogin:
    """Tests for credential checking."""

    def test_login_success(self, service, auth_config):
        result = service.login(auth_config.username, auth_config.password)
        assert result.success is True
        assert result.token
        assert service.verify(result.token).claims.subject == auth_config.username

    @pytest.mark.parametrize(
        "username,password",
        [
            ("admin", "wrong"),
            ("wrong", "s3cret-pass"),
            ("ADMIN", "s3cret-pass"),
            ("admin ", "s3cret-pass"),
            ("", ""),
            (None, None),
        ],
    )
    def test_login_failure_is_generic(self, service, username, password):
        result = service.login(username, password)
        assert result.success is False
        assert result.token is None
        assert result.message == LOGIN_FAILED_MESSAGE

    def test_login_disabled_issues_guest_token(self, clock):
        service = TokenService(AuthConfig(enabled=False, secret="s"), clock=clock)
        result = service.login("", "")
        assert result.success is True
        assert result.token
        assert service.verify(result.token).claims.subject == GUEST_IDENTITY
