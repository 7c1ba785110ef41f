"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    FedError (베이스)
    ├── ValidationError (입력 검증)
    ├── PolicyError (정책 파일 읽기/파싱)
    ├── SigninTokenError (콘솔 페더레이션 엔드포인트)
    └── APICallError (STS/IAM API 호출)

    인증 관련 예외(AuthError 계열)는 core.auth.types에 정의되어 있습니다.

Usage:
    from core.exceptions import APICallError

    try:
        resp = sts.get_federation_token(Name=name, Policy=policy)
    except ClientError as e:
        raise APICallError.from_client_error("sts", "get_federation_token", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class FedError(Exception):
    """aws-federate 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# 입력 관련 예외
# =============================================================================


class ValidationError(FedError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


class PolicyError(FedError):
    """정책 파일을 읽거나 파싱할 수 없는 경우"""

    def __init__(
        self,
        path: str,
        reason: str,
        cause: Optional[Exception] = None,
    ):
        message = f"정책 파일 오류 [{path}]: {reason}"
        super().__init__(message, cause)
        self.path = path
        self.details["path"] = path


class SigninTokenError(FedError):
    """콘솔 로그인 토큰 요청 실패

    네트워크 오류, 비정상 상태 코드, JSON 파싱 실패,
    SigninToken 누락 모두 이 예외로 표현됩니다.
    """

    def __init__(
        self,
        reason: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"로그인 토큰 요청 실패: {reason}"
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message, cause)
        self.status_code = status_code
        self.details["status_code"] = status_code


# =============================================================================
# AWS API 호출 관련 예외
# =============================================================================


class APICallError(FedError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # ClientError 메시지가 이미 message에 포함됨
        return self.message

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "APICallError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 예외

        Returns:
            APICallError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

def _error_code(error: Exception) -> Optional[str]:
    if isinstance(error, APICallError):
        return error.error_code
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code")
    return None


# 사용자 친화적 메시지 매핑 (STS 에러 코드 → i18n 키)
FRIENDLY_ERROR_KEYS = {
    "AccessDenied": "errors.access_denied",
    "ExpiredToken": "errors.expired_token",
    "InvalidClientTokenId": "errors.invalid_client_token",
    "SignatureDoesNotMatch": "errors.invalid_client_token",
    "MalformedPolicyDocument": "errors.malformed_policy",
    "PackedPolicyTooLarge": "errors.policy_too_large",
    "ValidationError": "errors.invalid_parameter",
}


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    알려진 STS 에러 코드는 친절한 메시지로 바꾸고 원본 메시지를 덧붙입니다.

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    from cli.i18n import t

    code = _error_code(error)
    key = FRIENDLY_ERROR_KEYS.get(code or "")
    if key:
        return f"{t(key)} ({error})"

    return str(error)
