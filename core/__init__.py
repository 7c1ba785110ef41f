# core/__init__.py
"""
core - aws-federate 인프라

CLI 아래에서 동작하는 자격증명 교환 로직 전체를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── auth/           # STS 임시 자격증명 발급 (session, sts, types)
    ├── federation/     # 콘솔 로그인 URL, 정책 로드, export 포맷
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings, get_default_region
    region = get_default_region()  # "us-west-2"

    # 자격증명 발급
    from core.auth import request_federation_token
    creds = request_federation_token("default", "test-user", 900, policy)

    # 콘솔 로그인 URL
    from core.federation import get_console_url
    url = get_console_url(creds)
"""

from core import auth, config, exceptions, federation

__all__: list[str] = [
    # 서브패키지
    "auth",
    "federation",
    # 모듈
    "config",
    "exceptions",
]
