# core/federation/__init__.py
"""
콘솔 페더레이션 및 출력 포맷 모듈

    - policy:  페더레이션 세션 정책 로드
    - signin:  콘솔 로그인 URL 생성 (signin.aws.amazon.com/federation)
    - export:  셸 export 문자열 포맷

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    # Policy
    "DEFAULT_POLICY",
    "load_policy",
    # Signin
    "build_signin_token_url",
    "build_login_url",
    "fetch_signin_token",
    "get_console_url",
    # Export
    "export_string",
    "format_exports",
]

_IMPORT_MAPPING = {
    "DEFAULT_POLICY": (".policy", "DEFAULT_POLICY"),
    "load_policy": (".policy", "load_policy"),
    "build_signin_token_url": (".signin", "build_signin_token_url"),
    "build_login_url": (".signin", "build_login_url"),
    "fetch_signin_token": (".signin", "fetch_signin_token"),
    "get_console_url": (".signin", "get_console_url"),
    "export_string": (".export", "export_string"),
    "format_exports": (".export", "format_exports"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
