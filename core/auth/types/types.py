# core/auth/types/types.py
"""
core/auth/types/types.py - AWS 인증 모듈의 핵심 타입 정의

이 모듈은 인증 시스템 전체에서 사용되는 기본 타입들을 정의합니다.

포함 항목:
    - TemporaryCredentials: STS가 발급한 임시 자격증명 (불변)
    - 에러 클래스: AuthError, ConfigurationError, ProviderError
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


# =============================================================================
# Temporary Credentials
# =============================================================================


@dataclass(frozen=True)
class TemporaryCredentials:
    """STS가 발급한 임시 자격증명

    프로세스 1회 실행 동안만 사용되며 변경되지 않습니다.

    Attributes:
        access_key_id: 액세스 키 ID (ASIA...)
        secret_access_key: 시크릿 액세스 키
        session_token: 세션 토큰
        expiration: 만료 시각 (timezone-aware)
    """

    access_key_id: str
    secret_access_key: str
    session_token: str
    expiration: datetime

    def __repr__(self) -> str:
        # 시크릿이 로그/트레이스백에 남지 않도록 마스킹
        return (
            f"TemporaryCredentials(access_key_id={self.access_key_id!r}, "
            f"secret_access_key='****', session_token='****', "
            f"expiration={self.expiration.isoformat()!r})"
        )

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> TemporaryCredentials:
        """STS 응답(Credentials 포함)으로부터 생성

        Args:
            response: get_federation_token / get_session_token 응답

        Returns:
            TemporaryCredentials 인스턴스

        Raises:
            ProviderError: Credentials 필드가 없거나 불완전한 경우
        """
        creds = response.get("Credentials") or {}
        try:
            expiration = creds["Expiration"]
            if isinstance(expiration, str):
                expiration = datetime.fromisoformat(expiration.replace("Z", "+00:00"))
            if expiration.tzinfo is None:
                expiration = expiration.replace(tzinfo=timezone.utc)

            return cls(
                access_key_id=creds["AccessKeyId"],
                secret_access_key=creds["SecretAccessKey"],
                session_token=creds["SessionToken"],
                expiration=expiration,
            )
        except (KeyError, ValueError) as e:
            raise ProviderError("sts", "parse_credentials", "응답에 자격증명이 없습니다", cause=e) from e

    def to_session_json(self) -> str:
        """콘솔 페더레이션 엔드포인트용 세션 JSON 직렬화

        공백 없는 compact JSON: {"sessionId":..,"sessionKey":..,"sessionToken":..}
        """
        return json.dumps(
            {
                "sessionId": self.access_key_id,
                "sessionKey": self.secret_access_key,
                "sessionToken": self.session_token,
            },
            separators=(",", ":"),
        )

    def to_dict(self) -> dict[str, str]:
        """STS 응답과 같은 키 이름의 dict (JSON 출력용)"""
        return {
            "AccessKeyId": self.access_key_id,
            "SecretAccessKey": self.secret_access_key,
            "SessionToken": self.session_token,
            "Expiration": self.expiration.isoformat(),
        }

    def local_expiration(self) -> str:
        """로컬 시간대 기준 만료 시각 (예: Mon Jan  2 15:04:05 KST 2006)"""
        local = self.expiration.astimezone()
        return f"{local:%a %b} {local.day:>2} {local:%H:%M:%S %Z %Y}"


# =============================================================================
# Error Classes
# =============================================================================


class AuthError(Exception):
    """인증 관련 기본 에러 클래스

    모든 인증 에러의 부모 클래스입니다.
    원인 예외(cause)를 체이닝하여 디버깅을 용이하게 합니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (옵션)
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigurationError(AuthError):
    """설정 오류가 발생했을 때 발생하는 에러

    존재하지 않는 프로파일, MFA 디바이스를 찾을 수 없는 경우 등에 발생합니다.

    Attributes:
        config_key: 문제가 된 설정 키 이름 (옵션)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key


class ProviderError(AuthError):
    """자격증명 획득 과정에서 발생하는 에러

    에러 메시지 형식: "[provider] operation: message"

    Attributes:
        provider: 에러가 발생한 대상 (예: "sts", "profile:dev")
        operation: 실패한 작업 이름 (예: "get_federation_token")
    """

    def __init__(
        self,
        provider: str,
        operation: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"[{provider}] {operation}: {message}"
        super().__init__(full_message, cause)
        self.provider = provider
        self.operation = operation
