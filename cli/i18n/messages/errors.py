"""
cli/i18n/messages/errors.py - Error Messages

Friendly messages for well-known STS error codes.
"""

from __future__ import annotations

ERROR_MESSAGES = {
    "access_denied": {
        "ko": "권한이 없습니다. IAM 정책을 확인하세요.",
        "en": "Access denied. Check the IAM policy.",
    },
    "expired_token": {
        "ko": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
        "en": "The security token has expired. Sign in again.",
    },
    "invalid_client_token": {
        "ko": "잘못된 자격 증명입니다.",
        "en": "Invalid credentials.",
    },
    "malformed_policy": {
        "ko": "정책 문서가 올바르지 않습니다.",
        "en": "The policy document is malformed.",
    },
    "policy_too_large": {
        "ko": "정책 문서가 너무 큽니다.",
        "en": "The policy document is too large.",
    },
    "invalid_parameter": {
        "ko": "요청 파라미터가 올바르지 않습니다.",
        "en": "Invalid request parameter.",
    },
    "exit_failure": {
        "ko": "실패: {message}",
        "en": "Failed: {message}",
    },
}
