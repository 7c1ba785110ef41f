"""
cli/i18n/messages/output.py - Credential Output Labels
"""

from __future__ import annotations

OUTPUT_MESSAGES = {
    "access_key": {
        "ko": "Access Key:",
        "en": "Access Key:",
    },
    "secret_key": {
        "ko": "Secret Key:",
        "en": "Secret Key:",
    },
    "session_token": {
        "ko": "Session Token:",
        "en": "Session Token:",
    },
    "console_url": {
        "ko": "URL:",
        "en": "URL:",
    },
    "expires_at": {
        "ko": "Credentials expires at:",
        "en": "Credentials expires at:",
    },
    "default_policy": {
        "ko": "정책 파일이 없어 모든 작업을 허용하는 기본 정책을 사용합니다: {path}",
        "en": "No policy file found, using the allow-all default policy: {path}",
    },
    "url_valid_for": {
        "ko": "로그인 URL은 15분 동안 유효합니다",
        "en": "The signin URL is valid for 15 minutes",
    },
}
