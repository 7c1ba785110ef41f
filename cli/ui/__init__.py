# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 출력 헬퍼 (자격증명 출력, 에러 출력, 로깅 설정)
"""

from .console import (
    LABEL_STYLE,
    SYMBOL_ERROR,
    SYMBOL_WARNING,
    console,
    err_console,
    get_console,
    print_credentials,
    print_error,
    print_field,
    print_results_json,
    print_warning,
    setup_logging,
)

__all__ = [
    "LABEL_STYLE",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "console",
    "err_console",
    "get_console",
    "print_credentials",
    "print_error",
    "print_field",
    "print_results_json",
    "print_warning",
    "setup_logging",
]
