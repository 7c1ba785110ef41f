"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, option help text, and usage notes.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Group
    # =========================================================================
    "help_intro": {
        "ko": "장기 AWS 자격증명을 단기 페더레이션/세션 자격증명으로 교환하는 CLI 도구입니다.",
        "en": "Exchange long-lived AWS credentials for short-lived federation or session credentials.",
    },
    "opt_lang": {
        "ko": "출력 언어 (ko/en, 기본값: $AWSFED_LANG 또는 ko)",
        "en": "Output language (ko/en, default: $AWSFED_LANG or ko)",
    },
    "opt_debug": {
        "ko": "디버그 로그 출력 (stderr)",
        "en": "Print debug logs (stderr)",
    },
    # =========================================================================
    # Commands
    # =========================================================================
    "cmd_console": {
        "ko": "페더레이션 토큰을 발급하고 AWS 콘솔 로그인 URL을 생성합니다.",
        "en": "Issue a federation token and build an AWS console signin URL.",
    },
    "cmd_federate": {
        "ko": "GetFederationToken으로 페더레이션 자격증명을 발급합니다.",
        "en": "Issue federation credentials with GetFederationToken.",
    },
    "cmd_session": {
        "ko": "GetSessionToken으로 세션 자격증명을 발급합니다 (MFA 선택).",
        "en": "Issue session credentials with GetSessionToken (optional MFA).",
    },
    # =========================================================================
    # Options
    # =========================================================================
    "opt_profile": {
        "ko": "AWS 자격증명 프로파일 (기본값: $AWS_PROFILE, $AWS_DEFAULT_PROFILE, 없으면 SDK 기본 자격증명 체인)",
        "en": "AWS credential profile (default: $AWS_PROFILE, $AWS_DEFAULT_PROFILE, else the SDK default credential chain)",
    },
    "opt_user": {
        "ko": "임시 사용자 이름",
        "en": "Name of temporary user",
    },
    "opt_duration": {
        "ko": "자격증명 유효 기간 (초)",
        "en": "Credentials expiration time in seconds",
    },
    "opt_region": {
        "ko": "STS 리전 (기본값: $AWS_REGION 또는 us-west-2)",
        "en": "STS region (default: $AWS_REGION or us-west-2)",
    },
    "opt_policy": {
        "ko": "세션 정책 파일 (없으면 모든 작업 허용)",
        "en": "Session policy file (allow-all when missing)",
    },
    "opt_mfa_code": {
        "ko": "MFA 토큰 코드 (6자리)",
        "en": "MFA token code (6 digits)",
    },
    "opt_mfa_serial": {
        "ko": "MFA 디바이스 시리얼/ARN (기본값: 프로파일의 mfa_serial 또는 IAM 조회)",
        "en": "MFA device serial/ARN (default: profile mfa_serial or IAM lookup)",
    },
    "opt_format": {
        "ko": "출력 형식",
        "en": "Output format",
    },
}
