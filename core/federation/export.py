"""
core/federation/export.py - 셸 export 문자열 포맷

`eval "$(fed session --format export)"` 형태로 현재 셸에 자격증명을 적용할 수 있도록
한 줄짜리 export 문장을 만듭니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.config import settings

if TYPE_CHECKING:
    from core.auth.types import TemporaryCredentials


def export_string(key: str, value: str) -> str:
    """단일 export 문장 (예: "export K=V;")"""
    return f"export {key}={value};"


def format_exports(credentials: TemporaryCredentials, region: str | None = None) -> str:
    """자격증명을 한 줄 export 문자열로 변환

    Args:
        credentials: 임시 자격증명
        region: 지정 시 AWS_DEFAULT_REGION도 포함

    Returns:
        "export AWS_ACCESS_KEY_ID=...; export AWS_SECRET_ACCESS_KEY=...; export AWS_SESSION_TOKEN=...;"
    """
    values = (
        credentials.access_key_id,
        credentials.secret_access_key,
        credentials.session_token,
    )
    statements = [export_string(key, value) for key, value in zip(settings.EXPORT_VARIABLES, values)]
    if region:
        statements.append(export_string("AWS_DEFAULT_REGION", region))
    return " ".join(statements)
