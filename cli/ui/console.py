"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들.
명령 결과는 stdout(console), 로그와 에러는 stderr(err_console)로 분리합니다.
"""

from __future__ import annotations

import json
import logging
import platform
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli.i18n import t

if TYPE_CHECKING:
    from core.auth.types import TemporaryCredentials
    from core.config import LogConfig

# botocore 노이즈 로그 제한
NOISY_LOGGERS = (
    "botocore.httpchecksum",
    "botocore.credentials",
    "botocore.loaders",
    "botocore.session",
    "urllib3.connectionpool",
)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()
err_console = get_console(stderr=True)


def setup_logging(config: LogConfig, debug: bool = False) -> None:
    """루트 logger에 RichHandler(stderr)를 설정합니다.

    Args:
        config: 로그 레벨/포맷 설정
        debug: True면 DEBUG 레벨로 강제
    """
    level = logging.DEBUG if debug else getattr(logging, config.level, logging.WARNING)

    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=debug)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


# =============================================================================
# 표준 출력 스타일
# =============================================================================

SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"
LABEL_STYLE = "bold green"


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X, stderr)"""
    err_console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색, stderr)"""
    err_console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]")


def print_field(label: str, value: str) -> None:
    """라벨(굵은 초록) + 값 한 줄 출력"""
    console.print(f"[{LABEL_STYLE}]{escape(label)}[/{LABEL_STYLE}] {escape(value)}")


def print_credentials(credentials: TemporaryCredentials, console_url: str | None = None) -> None:
    """임시 자격증명을 라벨/값 형식으로 출력합니다.

    Args:
        credentials: 출력할 자격증명
        console_url: 콘솔 로그인 URL (console 명령에서만)
    """
    print_field(t("output.access_key"), credentials.access_key_id)
    print_field(t("output.secret_key"), credentials.secret_access_key)
    print_field(t("output.session_token"), credentials.session_token)
    if console_url:
        print_field(t("output.console_url"), console_url)
        console.print(f"[dim]{t('output.url_valid_for')}[/dim]")
    print_field(t("output.expires_at"), credentials.local_expiration())


def print_results_json(data: dict[str, Any]) -> None:
    """JSON 형식으로 데이터 출력

    파이프 처리를 위해 하이라이팅 없이 그대로 출력합니다.
    """
    console.print_json(json.dumps(data, ensure_ascii=False, default=str), highlight=False)
