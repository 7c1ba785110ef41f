"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
장기 자격증명 프로파일로 STS를 호출하여 단기 자격증명을 발급하고 출력합니다.

명령어 구조:
    fed --version           # 버전 표시
    fed console             # 페더레이션 토큰 + 콘솔 로그인 URL
    fed federate            # 페더레이션 토큰 (text/export/json)
    fed session             # 세션 토큰, MFA 선택 (text/export/json)

    예시:
    fed console -p prod -u alice -x 3600
    eval "$(fed session -p dev -m 123456 -f export)"

에러 처리:
    모든 오류는 즉시 종료합니다. 메시지를 stderr에 출력하고 종료 코드 1을 반환합니다.
    재시도나 부분 성공은 없습니다.

Usage:
    $ fed console
    $ python -m cli.app session --mfa-code 123456
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

# 프로젝트 루트를 sys.path에 추가 (python -m cli.app 실행 지원)
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import click  # noqa: E402

from cli.i18n import SUPPORTED_LANGS, resolve_lang, set_lang, t  # noqa: E402
from cli.ui.console import (  # noqa: E402
    print_credentials,
    print_error,
    print_results_json,
    print_warning,
    setup_logging,
)
from core.auth.types import AuthError  # noqa: E402
from core.config import LogConfig, get_default_profile, get_default_region, get_version, settings  # noqa: E402
from core.exceptions import FedError, format_error_for_user  # noqa: E402

logger = logging.getLogger(__name__)

# 옵션 help 텍스트는 import 시점에 결정되므로 AWSFED_LANG을 먼저 반영
set_lang(resolve_lang())

VERSION = get_version()

FORMAT_TEXT = "text"
FORMAT_EXPORT = "export"
FORMAT_JSON = "json"

# 즉시 종료 대상 예외
FATAL_ERRORS = (FedError, AuthError)


def _fail(error: Exception) -> NoReturn:
    """에러 메시지 출력 후 종료 코드 1로 종료"""
    logger.debug("명령 실패: %s", getattr(error, "details", {}), exc_info=error)
    print_error(t("errors.exit_failure", message=format_error_for_user(error)))
    raise SystemExit(1)


def _resolve_profile(profile: str | None) -> str | None:
    """--profile → AWS_PROFILE → AWS_DEFAULT_PROFILE (없으면 SDK 기본 체인)"""
    return profile or get_default_profile()


def _emit(credentials, output_format: str, export_region: str | None = None, console_url: str | None = None) -> None:
    """선택된 형식으로 자격증명 출력"""
    if output_format == FORMAT_EXPORT:
        from core.federation.export import format_exports

        click.echo(format_exports(credentials, export_region))
        return

    if output_format == FORMAT_JSON:
        data = credentials.to_dict()
        if console_url:
            data["ConsoleUrl"] = console_url
        print_results_json(data)
        return

    print_credentials(credentials, console_url)


def _request_federation(profile, user, duration, policy_file, region):
    """정책 로드 후 GetFederationToken 호출"""
    from core.auth.sts import request_federation_token
    from core.federation.policy import load_policy

    if not Path(policy_file).exists():
        print_warning(t("output.default_policy", path=policy_file))
    policy = load_policy(policy_file)

    return request_federation_token(
        _resolve_profile(profile),
        user,
        duration,
        policy,
        region=region or get_default_region(),
    )


# =============================================================================
# 공통 옵션
# =============================================================================


def profile_option(f):
    return click.option("-p", "--profile", "profile", default=None, help=t("cli.opt_profile"))(f)


def region_option(f):
    return click.option("-r", "--region", "region", default=None, help=t("cli.opt_region"))(f)


def duration_option(default: int):
    return click.option(
        "-x",
        "--duration",
        "duration",
        type=int,
        default=default,
        show_default=True,
        help=t("cli.opt_duration"),
    )


def federation_options(f):
    f = click.option(
        "--policy",
        "policy_file",
        default=settings.DEFAULT_POLICY_FILE,
        show_default=True,
        type=click.Path(dir_okay=False),
        help=t("cli.opt_policy"),
    )(f)
    f = click.option(
        "-u",
        "--user",
        "user",
        default=settings.DEFAULT_PRINCIPAL_NAME,
        show_default=True,
        help=t("cli.opt_user"),
    )(f)
    return f


def format_option(*choices: str):
    return click.option(
        "-f",
        "--format",
        "output_format",
        type=click.Choice(list(choices)),
        default=FORMAT_TEXT,
        show_default=True,
        help=t("cli.opt_format"),
    )


# =============================================================================
# CLI 그룹
# =============================================================================


@click.group(help=t("cli.help_intro"))
@click.version_option(VERSION, "-V", "--version", prog_name="fed")
@click.option("--lang", type=click.Choice(list(SUPPORTED_LANGS)), default=None, help=t("cli.opt_lang"))
@click.option("--debug", is_flag=True, default=False, help=t("cli.opt_debug"))
def cli(lang: str | None, debug: bool) -> None:
    set_lang(resolve_lang(lang))
    setup_logging(LogConfig.from_env(), debug=debug)


@cli.command(name="console", help=t("cli.cmd_console"))
@profile_option
@federation_options
@duration_option(settings.FEDERATION_DURATION_SECONDS)
@region_option
@format_option(FORMAT_TEXT, FORMAT_JSON)
def console_cmd(
    profile: str | None,
    user: str,
    policy_file: str,
    duration: int,
    region: str | None,
    output_format: str,
) -> None:
    """페더레이션 토큰 발급 후 콘솔 로그인 URL 출력"""
    from core.federation.signin import get_console_url

    try:
        credentials = _request_federation(profile, user, duration, policy_file, region)
        console_url = get_console_url(credentials)
    except FATAL_ERRORS as e:
        _fail(e)

    _emit(credentials, output_format, console_url=console_url)


@cli.command(name="federate", help=t("cli.cmd_federate"))
@profile_option
@federation_options
@duration_option(settings.FEDERATION_DURATION_SECONDS)
@region_option
@format_option(FORMAT_TEXT, FORMAT_EXPORT, FORMAT_JSON)
def federate_cmd(
    profile: str | None,
    user: str,
    policy_file: str,
    duration: int,
    region: str | None,
    output_format: str,
) -> None:
    """페더레이션 토큰 발급"""
    try:
        credentials = _request_federation(profile, user, duration, policy_file, region)
    except FATAL_ERRORS as e:
        _fail(e)

    _emit(credentials, output_format, export_region=region)


@cli.command(name="session", help=t("cli.cmd_session"))
@profile_option
@duration_option(settings.SESSION_DURATION_SECONDS)
@region_option
@click.option("-m", "--mfa-code", "mfa_code", default=None, help=t("cli.opt_mfa_code"))
@click.option("--mfa-serial", "mfa_serial", default=None, help=t("cli.opt_mfa_serial"))
@format_option(FORMAT_TEXT, FORMAT_EXPORT, FORMAT_JSON)
def session_cmd(
    profile: str | None,
    duration: int,
    region: str | None,
    mfa_code: str | None,
    mfa_serial: str | None,
    output_format: str,
) -> None:
    """세션 토큰 발급 (MFA 선택)"""
    from core.auth.sts import request_session_token

    try:
        credentials = request_session_token(
            _resolve_profile(profile),
            region or get_default_region(),
            duration,
            mfa_code=mfa_code,
            mfa_serial=mfa_serial,
        )
    except FATAL_ERRORS as e:
        _fail(e)

    _emit(credentials, output_format, export_region=region)


if __name__ == "__main__":
    cli()
