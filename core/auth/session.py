# core/auth/session.py
"""
core/auth/session.py - 프로파일 기반 boto3 Session 헬퍼

~/.aws/credentials, ~/.aws/config 파싱은 boto3/botocore에 위임하고,
이 모듈은 세션 생성과 MFA 디바이스 시리얼 조회만 담당합니다.

Usage:
    from core.auth.session import create_session, resolve_mfa_serial

    session = create_session("dev", "us-west-2")
    serial = resolve_mfa_serial(session)  # 프로파일의 mfa_serial 또는 IAM 조회
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError, ProfileNotFound

from core.auth.types import ConfigurationError, ProviderError
from core.exceptions import APICallError

if TYPE_CHECKING:
    from mypy_boto3_sts import STSClient

logger = logging.getLogger(__name__)


def create_session(profile: str | None, region: str | None = None) -> boto3.Session:
    """지정된 프로파일/리전으로 boto3 Session 생성

    Args:
        profile: 자격증명 프로파일 이름 (None이면 기본 자격증명 체인)
        region: AWS 리전

    Returns:
        boto3.Session 객체

    Raises:
        ConfigurationError: 프로파일이 존재하지 않는 경우
    """
    logger.debug("세션 생성: profile=%s, region=%s", profile, region)
    try:
        return boto3.Session(profile_name=profile, region_name=region)
    except ProfileNotFound as e:
        raise ConfigurationError(f"프로파일을 찾을 수 없습니다: {profile}", config_key="profile", cause=e) from e


def get_sts_client(session: boto3.Session, region: str | None = None) -> STSClient:
    """세션에서 STS 클라이언트 생성"""
    return session.client("sts", region_name=region or session.region_name)


def _profile_setting(session: boto3.Session, key: str) -> str | None:
    """세션 프로파일의 설정값 조회 (~/.aws/config)"""
    try:
        value = session._session.get_scoped_config().get(key)
    except ProfileNotFound:
        return None
    return value if isinstance(value, str) and value else None


def resolve_mfa_serial(session: boto3.Session, explicit: str | None = None) -> str:
    """MFA 디바이스 시리얼(ARN) 결정

    우선순위:
        1. 명시적으로 전달된 값 (--mfa-serial)
        2. 프로파일의 mfa_serial 설정
        3. iam:ListMFADevices 결과의 첫 번째 디바이스

    Args:
        session: boto3 Session
        explicit: CLI로 지정된 시리얼

    Returns:
        MFA 디바이스 시리얼 또는 ARN

    Raises:
        ConfigurationError: MFA 디바이스를 찾을 수 없는 경우
        APICallError: IAM 조회 실패
        ProviderError: IAM 요청 전송 실패
    """
    if explicit:
        return explicit

    configured = _profile_setting(session, "mfa_serial")
    if configured:
        logger.debug("프로파일 mfa_serial 사용: %s", configured)
        return configured

    try:
        iam = session.client("iam")
        response = iam.list_mfa_devices()
    except ClientError as e:
        raise APICallError.from_client_error("iam", "list_mfa_devices", e) from e
    except NoCredentialsError as e:
        raise ConfigurationError("자격증명을 찾을 수 없습니다", config_key="profile", cause=e) from e
    except BotoCoreError as e:
        raise ProviderError("iam", "list_mfa_devices", "요청 실패", cause=e) from e

    devices = response.get("MFADevices", [])
    if not devices:
        raise ConfigurationError("MFA 디바이스를 찾을 수 없습니다. --mfa-serial 옵션을 지정하세요", config_key="mfa_serial")

    serial = devices[0]["SerialNumber"]
    logger.debug("IAM에서 MFA 디바이스 조회: %s", serial)
    return serial
