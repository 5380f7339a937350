"""
요청 헤더의 JWT에서 사용자 식별자를 읽는 유틸리티 함수

주의: 서명 검증을 하지 않습니다. 토큰의 클레임을 그대로 읽을 뿐이므로
인증(authentication) 수단이 아니라 목록 조회 필터용 식별자 추출입니다.
"""

import json
import logging
from typing import Any, Mapping

from jwt.utils import base64url_decode

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Cognito ID 토큰에서 사용자를 나타내는 클레임 (우선순위 순)
IDENTITY_CLAIMS = ("email", "cognito:username", "preferred_username")


def get_header(headers: Mapping[str, Any] | None, name: str) -> str | None:
    """
    대소문자를 구분하지 않고 헤더 값을 조회합니다.

    Example:
        >>> get_header({"authorization": "Bearer x"}, "Authorization")
        'Bearer x'
    """
    if not headers:
        return None
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def read_token_claims(token: str) -> dict[str, Any] | None:
    """
    JWT(헤더.페이로드.서명)의 페이로드를 서명 검증 없이 디코딩합니다.

    Args:
        token: "Bearer " 접두사를 제거한 토큰 문자열

    Returns:
        Dict[str, Any]: 페이로드 클레임, 형식이 잘못되었으면 None
    """
    parts = token.split(".")
    if len(parts) != 3:
        logger.error("Invalid JWT format: Not 3 parts.")
        return None

    try:
        payload = json.loads(base64url_decode(parts[1]).decode("utf-8"))
    except ValueError as e:
        # base64 패딩 오류, UTF-8 디코딩 오류, JSON 파싱 오류 모두 ValueError
        logger.error("Error decoding JWT or parsing payload: %s", e)
        return None

    if not isinstance(payload, dict):
        logger.error("Invalid JWT payload: not a JSON object.")
        return None
    return payload


def extract_identity(headers: Mapping[str, Any] | None) -> str | None:
    """
    Authorization 헤더에서 사용자 식별자를 추출합니다.

    email, cognito:username, preferred_username 순서로 처음 발견된 값을
    반환합니다. 서명 검증은 하지 않습니다.

    Args:
        headers: 요청 헤더 (키 대소문자 무관)

    Returns:
        str | None: 사용자 식별자, 헤더가 없거나 토큰이 잘못되었으면 None

    Example:
        >>> extract_identity({"Authorization": "Bearer <header>.<payload>.<sig>"})
        'alice@example.com'
    """
    authorization = get_header(headers, "Authorization")
    if not authorization:
        logger.warning("Authorization header missing.")
        return None

    token = authorization
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]

    claims = read_token_claims(token)
    if claims is None:
        return None

    for claim in IDENTITY_CLAIMS:
        value = claims.get(claim)
        if value:
            return value
    return None
