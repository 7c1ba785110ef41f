# core/auth/__init__.py
"""
AWS 임시 자격증명 모듈 (core/auth)

장기 자격증명 프로파일을 STS 단기 자격증명으로 교환합니다.

    - types:   TemporaryCredentials, 인증 에러 클래스
    - session: 프로파일 기반 boto3 Session, MFA 시리얼 조회
    - sts:     GetFederationToken / GetSessionToken 호출

사용 예시:
    from core.auth import request_federation_token, request_session_token

    creds = request_federation_token("default", "test-user", 900, policy)
    creds = request_session_token("dev", "us-west-2", 3600, mfa_code="123456")

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Types
    "TemporaryCredentials",
    "AuthError",
    "ConfigurationError",
    "ProviderError",
    # Session 헬퍼
    "create_session",
    "get_sts_client",
    "resolve_mfa_serial",
    # STS
    "request_federation_token",
    "request_session_token",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Types
    "TemporaryCredentials": (".types", "TemporaryCredentials"),
    "AuthError": (".types", "AuthError"),
    "ConfigurationError": (".types", "ConfigurationError"),
    "ProviderError": (".types", "ProviderError"),
    # Session 헬퍼
    "create_session": (".session", "create_session"),
    "get_sts_client": (".session", "get_sts_client"),
    "resolve_mfa_serial": (".session", "resolve_mfa_serial"),
    # STS
    "request_federation_token": (".sts", "request_federation_token"),
    "request_session_token": (".sts", "request_session_token"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드

    CLI 시작 시간 최적화를 위해 무거운 의존성(boto3 등)을
    실제 필요한 시점에만 로드합니다.
    """
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
