"""
core/federation/policy.py - 페더레이션 세션 정책 로드

GetFederationToken에 전달할 IAM 정책 문서를 파일에서 읽습니다.
파일이 없거나 비어 있으면 모든 작업을 허용하는 기본 정책을 사용합니다.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.config import settings
from core.exceptions import PolicyError

logger = logging.getLogger(__name__)

DEFAULT_POLICY = '{"Version":"2012-10-17","Statement": [{"Action": "*","Effect": "Allow","Resource": "*"}]}'


def load_policy(path: str | Path = settings.DEFAULT_POLICY_FILE) -> str:
    """정책 문서 로드

    Args:
        path: 정책 파일 경로 (기본: 현재 디렉토리의 policy.json)

    Returns:
        정책 JSON 문자열 (파일 내용 그대로, 없으면 DEFAULT_POLICY)

    Raises:
        PolicyError: 파일을 읽을 수 없거나 JSON 객체가 아닌 경우
    """
    policy_path = Path(path)
    if not policy_path.exists():
        logger.debug("정책 파일 없음, 기본 정책 사용: %s", policy_path)
        return DEFAULT_POLICY

    try:
        contents = policy_path.read_text(encoding="utf-8")
    except OSError as e:
        raise PolicyError(str(policy_path), "파일을 읽을 수 없습니다", cause=e) from e

    if not contents.strip():
        logger.debug("정책 파일이 비어 있음, 기본 정책 사용: %s", policy_path)
        return DEFAULT_POLICY

    try:
        document = json.loads(contents)
    except json.JSONDecodeError as e:
        raise PolicyError(str(policy_path), "유효한 JSON이 아닙니다", cause=e) from e

    if not isinstance(document, dict):
        raise PolicyError(str(policy_path), "정책 문서는 JSON 객체여야 합니다")

    logger.debug("정책 파일 로드: %s (%d bytes)", policy_path, len(contents))
    return contents
