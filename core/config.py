# core/config.py
"""
core/config.py - 중앙 설정 관리

애플리케이션 전체에서 사용하는 기본값과 환경변수 헬퍼를 정의합니다.

우선순위:
    1. CLI 옵션 (cli/app.py)
    2. 환경변수 (AWS_PROFILE, AWS_REGION, LOG_LEVEL 등)
    3. Settings 기본값

Usage:
    from core.config import settings, get_default_profile, get_default_region

    profile = get_default_profile()  # None이면 SDK 기본 자격증명 체인
    region = get_default_region()  # "us-west-2"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """불변 애플리케이션 설정

    Attributes:
        DEFAULT_REGION: STS 호출 기본 리전
        DEFAULT_PRINCIPAL_NAME: 페더레이션 사용자 기본 이름
        DEFAULT_POLICY_FILE: 페더레이션 정책 파일 기본 경로
        FEDERATION_DURATION_SECONDS: GetFederationToken 기본 유효 기간
        SESSION_DURATION_SECONDS: GetSessionToken 기본 유효 기간
        MIN_DURATION_SECONDS / MAX_DURATION_SECONDS: STS 허용 범위
        FEDERATION_ENDPOINT: 콘솔 페더레이션 엔드포인트
        CONSOLE_DESTINATION: 로그인 후 이동할 콘솔 주소
        HTTP_TIMEOUT: 페더레이션 엔드포인트 요청 타임아웃 (초)
    """

    DEFAULT_REGION: str = "us-west-2"
    DEFAULT_PRINCIPAL_NAME: str = "test-user"
    DEFAULT_POLICY_FILE: str = "policy.json"

    FEDERATION_DURATION_SECONDS: int = 900
    SESSION_DURATION_SECONDS: int = 3600
    MIN_DURATION_SECONDS: int = 900
    MAX_DURATION_SECONDS: int = 129600

    FEDERATION_ENDPOINT: str = "https://signin.aws.amazon.com/federation"
    CONSOLE_DESTINATION: str = "https://console.aws.amazon.com/"
    HTTP_TIMEOUT: int = 30

    EXPORT_VARIABLES: tuple[str, ...] = field(
        default=(
            "AWS_ACCESS_KEY_ID",
            "AWS_SECRET_ACCESS_KEY",
            "AWS_SESSION_TOKEN",
        )
    )


settings = Settings()


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 (core/ 상위 디렉토리)"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """version.txt에서 버전 문자열 반환

    파일이 없으면 "0.0.0"을 반환합니다.
    """
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (실패 시 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_default_profile() -> str | None:
    """AWS_PROFILE → AWS_DEFAULT_PROFILE 순으로 프로파일 조회"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE")


def get_default_region() -> str:
    """AWS_REGION → AWS_DEFAULT_REGION → Settings 기본값 순으로 리전 조회"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


def get_http_timeout() -> int:
    """페더레이션 엔드포인트 타임아웃 (AWSFED_HTTP_TIMEOUT으로 재정의 가능)"""
    return get_env_int("AWSFED_HTTP_TIMEOUT", settings.HTTP_TIMEOUT)


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정

    Attributes:
        level: 로그 레벨 이름
        format: 로그 포맷 문자열 (시각/레벨은 RichHandler가 표시)
        date_format: 날짜 포맷
    """

    level: str = "WARNING"
    format: str = "%(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL, LOG_FORMAT 환경변수에서 로드"""
        defaults = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", defaults.level).upper(),
            format=os.environ.get("LOG_FORMAT", defaults.format),
        )


__all__ = [
    "Settings",
    "settings",
    "LogConfig",
    "get_project_root",
    "get_version",
    "get_env_int",
    "get_default_profile",
    "get_default_region",
    "get_http_timeout",
]
