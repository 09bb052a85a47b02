"""
Compact bearer token encoding.

Tokens are three base64url segments, ``header.claims.tag``, where the tag is
an HMAC-SHA256 over ``header.claims`` keyed with the server secret. This is the
standard HS256 JWS layout, so tokens can be inspected with any JWT tool.

The codec only shapes and parses tokens. Deciding whether a token is valid
(tag comparison, expiry) belongs to ``TokenService``.
"""

import binascii
import json
import re
from dataclasses import dataclass

from jose import jwk, jwt
from jose.utils import base64url_decode, base64url_encode
from pydantic import ValidationError

from navhive.schemas.auth import TokenClaims

TOKEN_ALGORITHM = "HS256"

_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class MalformedToken(Exception):
    pass


@dataclass(frozen=True)
class DecodedToken:
    header: dict
    claims: TokenClaims
    header_segment: str
    claims_segment: str
    tag_segment: str


def encode(claims: TokenClaims, secret: str) -> str:
    return jwt.encode(claims.to_payload(), secret, algorithm=TOKEN_ALGORITHM)


def sign(header_segment: str, claims_segment: str, secret: str) -> str:
    signing_input = f"{header_segment}.{claims_segment}".encode("ascii")
    key = jwk.construct(secret, TOKEN_ALGORITHM)
    return base64url_encode(key.sign(signing_input)).decode("ascii")


def _decode_segment(segment: str) -> bytes:
    # The decoder silently drops characters outside the alphabet
    if not _SEGMENT_PATTERN.fullmatch(segment):
        raise MalformedToken("segment contains characters outside base64url")
    try:
        return base64url_decode(segment.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error, ValueError) as e:
        raise MalformedToken("segment is not valid base64url") from e


def _parse_json_object(raw: bytes, name: str) -> dict:
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise MalformedToken(f"{name} is not valid JSON") from e
    if not isinstance(value, dict):
        raise MalformedToken(f"{name} is not a JSON object")
    return value


def decode(token: str) -> DecodedToken:
    """
    Split and parse a token without checking its tag or expiry.

    Raises MalformedToken unless the token has exactly three non-empty
    segments that all decode, a JSON header naming HS256, and claims that
    match TokenClaims.
    """
    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise MalformedToken("token must have three non-empty segments")

    header_segment, claims_segment, tag_segment = segments
    header_raw = _decode_segment(header_segment)
    claims_raw = _decode_segment(claims_segment)
    _decode_segment(tag_segment)

    header = _parse_json_object(header_raw, "header")
    if header.get("alg") != TOKEN_ALGORITHM:
        raise MalformedToken("unsupported token algorithm")

    try:
        claims = TokenClaims.model_validate(_parse_json_object(claims_raw, "claims"))
    except ValidationError as e:
        raise MalformedToken("claims do not match the expected shape") from e

    return DecodedToken(
        header=header,
        claims=claims,
        header_segment=header_segment,
        claims_segment=claims_segment,
        tag_segment=tag_segment,
    )
