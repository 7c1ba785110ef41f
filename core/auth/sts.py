# core/auth/sts.py
"""
core/auth/sts.py - STS 임시 자격증명 발급

장기 자격증명(프로파일)을 단기 자격증명으로 교환합니다.

    - request_federation_token(): GetFederationToken (정책으로 범위 제한, 콘솔 로그인 가능)
    - request_session_token(): GetSessionToken (MFA 코드 선택)

모든 실패는 예외로 전파되며 재시도하지 않습니다.

Usage:
    from core.auth.sts import request_federation_token

    creds = request_federation_token("default", "test-user", 900, policy)
    print(creds.access_key_id)
"""

from __future__ import annotations

import logging
import re

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError, ProfileNotFound

from core.auth.session import create_session, get_sts_client, resolve_mfa_serial
from core.auth.types import ConfigurationError, ProviderError, TemporaryCredentials
from core.config import settings
from core.exceptions import APICallError, ValidationError

logger = logging.getLogger(__name__)

# GetFederationToken Name 제약: 2~32자, ASCII [A-Za-z0-9_+=,.@-]
PRINCIPAL_NAME_PATTERN = re.compile(r"[A-Za-z0-9_+=,.@-]{2,32}")
MFA_CODE_PATTERN = re.compile(r"[0-9]{6}")


# =============================================================================
# 입력 검증
# =============================================================================


def validate_duration(duration_seconds: int) -> None:
    """유효 기간이 STS 허용 범위인지 확인"""
    if not settings.MIN_DURATION_SECONDS <= duration_seconds <= settings.MAX_DURATION_SECONDS:
        raise ValidationError(
            "duration",
            duration_seconds,
            f"{settings.MIN_DURATION_SECONDS}-{settings.MAX_DURATION_SECONDS}",
        )


def validate_principal_name(name: str) -> None:
    """페더레이션 사용자 이름 형식 확인"""
    if not PRINCIPAL_NAME_PATTERN.fullmatch(name or ""):
        raise ValidationError("user", name, "2-32 chars of [A-Za-z0-9_+=,.@-]")


def validate_mfa_code(code: str) -> None:
    """MFA 코드 형식 확인 (6자리 숫자)"""
    if not MFA_CODE_PATTERN.fullmatch(code or ""):
        raise ValidationError("mfa_code", code, "6 digits")


# =============================================================================
# STS 호출
# =============================================================================


def _call_sts(
    session: boto3.Session,
    profile: str | None,
    region: str | None,
    operation: str,
    **params,
) -> TemporaryCredentials:
    """STS 작업 호출 후 TemporaryCredentials로 변환

    ClientError는 APICallError로, 자격증명/전송 계층 오류는 ProviderError로 래핑합니다.
    """
    logger.debug("sts.%s 호출: profile=%s, region=%s", operation, profile, region)
    try:
        client = get_sts_client(session, region)
        response = getattr(client, operation)(**params)
    except ClientError as e:
        raise APICallError.from_client_error("sts", operation, e) from e
    except ProfileNotFound as e:
        raise ConfigurationError(f"프로파일을 찾을 수 없습니다: {profile}", config_key="profile", cause=e) from e
    except NoCredentialsError as e:
        raise ProviderError(f"profile:{profile}", operation, "자격증명을 찾을 수 없습니다", cause=e) from e
    except BotoCoreError as e:
        raise ProviderError("sts", operation, "요청 실패", cause=e) from e

    credentials = TemporaryCredentials.from_response(response)
    logger.debug("임시 자격증명 발급: %s", credentials)
    return credentials


def request_federation_token(
    profile: str | None,
    principal_name: str,
    duration_seconds: int,
    policy: str,
    region: str | None = None,
) -> TemporaryCredentials:
    """GetFederationToken으로 페더레이션 사용자 자격증명 발급

    Args:
        profile: 호출에 사용할 장기 자격증명 프로파일
        principal_name: 페더레이션 사용자 이름 (콘솔에 표시됨)
        duration_seconds: 유효 기간 (초)
        policy: 세션에 적용할 IAM 정책 JSON 문자열
        region: STS 리전

    Returns:
        TemporaryCredentials

    Raises:
        ValidationError: 입력값이 STS 제약을 벗어난 경우
        APICallError: STS가 요청을 거부한 경우 (잘못된 정책, 기간 초과 등)
        ConfigurationError / ProviderError: 프로파일/자격증명 문제
    """
    validate_principal_name(principal_name)
    validate_duration(duration_seconds)

    session = create_session(profile, region)
    return _call_sts(
        session,
        profile,
        region,
        "get_federation_token",
        Name=principal_name,
        DurationSeconds=duration_seconds,
        Policy=policy,
    )


def request_session_token(
    profile: str | None,
    region: str | None,
    duration_seconds: int,
    mfa_code: str | None = None,
    mfa_serial: str | None = None,
) -> TemporaryCredentials:
    """GetSessionToken으로 세션 자격증명 발급

    MFA 코드가 주어지면 디바이스 시리얼을 결정하여 함께 전달합니다.

    Args:
        profile: 장기 자격증명 프로파일
        region: STS 리전
        duration_seconds: 유효 기간 (초)
        mfa_code: MFA 토큰 코드 (6자리)
        mfa_serial: MFA 디바이스 시리얼/ARN (없으면 자동 결정)

    Returns:
        TemporaryCredentials
    """
    validate_duration(duration_seconds)

    if mfa_code:
        validate_mfa_code(mfa_code)

    session = create_session(profile, region)
    params: dict[str, object] = {"DurationSeconds": duration_seconds}
    if mfa_code:
        params["SerialNumber"] = resolve_mfa_serial(session, mfa_serial)
        params["TokenCode"] = mfa_code

    return _call_sts(session, profile, region, "get_session_token", **params)
