"""
core/federation/signin.py - AWS 콘솔 로그인 URL 생성

페더레이션 자격증명을 일회용 콘솔 로그인 URL로 교환합니다.

흐름:
    1. build_signin_token_url(): 세션 JSON을 담은 getSigninToken URL 생성
    2. fetch_signin_token(): 페더레이션 엔드포인트에 GET → {"SigninToken": "..."}
    3. build_login_url(): SigninToken을 담은 login URL 생성

로그인 URL은 발급 후 15분 이내에 사용해야 합니다.

Usage:
    from core.federation.signin import get_console_url

    url = get_console_url(credentials)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import requests

from core.config import get_http_timeout, settings
from core.exceptions import SigninTokenError

if TYPE_CHECKING:
    from core.auth.types import TemporaryCredentials

logger = logging.getLogger(__name__)


def _federation_url(params: dict[str, str]) -> str:
    """페더레이션 엔드포인트 URL에 쿼리 파라미터를 붙여 반환"""
    return requests.Request("GET", settings.FEDERATION_ENDPOINT, params=params).prepare().url


def build_signin_token_url(serialized_credentials: str) -> str:
    """getSigninToken 요청 URL 생성

    Args:
        serialized_credentials: TemporaryCredentials.to_session_json() 결과

    Returns:
        https://signin.aws.amazon.com/federation?Action=getSigninToken&Session=...
    """
    return _federation_url(
        {
            "Action": "getSigninToken",
            "Session": serialized_credentials,
        }
    )


def build_login_url(signin_token: str) -> str:
    """콘솔 로그인 URL 생성

    Args:
        signin_token: fetch_signin_token()으로 받은 토큰

    Returns:
        https://signin.aws.amazon.com/federation?Action=login&Destination=...&SigninToken=...
    """
    return _federation_url(
        {
            "Action": "login",
            "Destination": settings.CONSOLE_DESTINATION,
            "SigninToken": signin_token,
        }
    )


def fetch_signin_token(url: str, timeout: int | None = None) -> str:
    """페더레이션 엔드포인트에서 SigninToken 획득

    Args:
        url: build_signin_token_url() 결과
        timeout: 요청 타임아웃 (초, 기본: settings.HTTP_TIMEOUT)

    Returns:
        SigninToken 문자열 (빈 값은 반환하지 않음)

    Raises:
        SigninTokenError: 네트워크 오류, 비정상 응답, JSON 파싱 실패, 토큰 누락
    """
    if timeout is None:
        timeout = get_http_timeout()

    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise SigninTokenError("네트워크 오류", cause=e) from e

    if not response.ok:
        raise SigninTokenError("페더레이션 엔드포인트가 요청을 거부했습니다", status_code=response.status_code)

    try:
        body = response.json()
    except ValueError as e:
        raise SigninTokenError("응답이 유효한 JSON이 아닙니다", status_code=response.status_code, cause=e) from e

    signin_token = body.get("SigninToken") if isinstance(body, dict) else None
    if not isinstance(signin_token, str) or not signin_token:
        raise SigninTokenError("응답에 SigninToken이 없습니다", status_code=response.status_code)

    logger.debug("SigninToken 수신 (%d chars)", len(signin_token))
    return signin_token


def get_console_url(credentials: TemporaryCredentials, timeout: int | None = None) -> str:
    """임시 자격증명으로 콘솔 로그인 URL 생성

    Args:
        credentials: GetFederationToken으로 받은 자격증명
        timeout: 페더레이션 엔드포인트 타임아웃 (초)

    Returns:
        콘솔 로그인 URL
    """
    token_url = build_signin_token_url(credentials.to_session_json())
    signin_token = fetch_signin_token(token_url, timeout=timeout)
    return build_login_url(signin_token)
