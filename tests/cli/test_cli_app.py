# tests/cli/test_cli_app.py
"""
cli/app.py 단위 테스트

CLI 메인 엔트리포인트 테스트.
STS/페더레이션 호출은 원본 모듈에서 패치합니다.
"""

import json
from unittest.mock import patch

import pytest
from botocore.exceptions import EndpointConnectionError
from click.testing import CliRunner

from cli.app import cli
from core.auth.types import ConfigurationError
from core.exceptions import APICallError, SigninTokenError

LOGIN_URL = "https://signin.aws.amazon.com/federation?Action=login&Destination=https%3A%2F%2Fconsole.aws.amazon.com%2F&SigninToken=tok"


@pytest.fixture
def runner():
    """Click CliRunner"""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """policy.json이 있는 임시 작업 디렉토리"""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "policy.json").write_text('{"Version":"2012-10-17","Statement":[]}', encoding="utf-8")
    return tmp_path


# =============================================================================
# CLI 그룹 테스트
# =============================================================================


class TestCLIGroup:
    """CLI 그룹 테스트"""

    def test_version_option(self, runner):
        """--version 옵션 테스트"""
        from core.config import get_version

        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "fed" in result.output
        assert get_version() in result.output

    def test_help_option(self, runner):
        """--help 옵션 테스트"""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("console", "federate", "session"):
            assert command in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(cli, ["nope"])
        assert result.exit_code == 2

    def test_command_help_shows_defaults(self, runner):
        result = runner.invoke(cli, ["federate", "--help"])
        assert result.exit_code == 0
        assert "--profile" in result.output
        assert "test-user" in result.output
        assert "policy.json" in result.output
        # 프로파일 미지정 시 SDK 기본 자격증명 체인 사용
        assert "SDK" in result.output


# =============================================================================
# console 명령어 테스트
# =============================================================================


class TestConsoleCommand:
    """fed console 테스트"""

    @patch("core.federation.signin.get_console_url")
    @patch("core.auth.sts.request_federation_token")
    def test_text_output(self, mock_request, mock_url, runner, workdir, sample_credentials):
        """자격증명 + URL + 만료 시각 출력"""
        mock_request.return_value = sample_credentials
        mock_url.return_value = LOGIN_URL

        result = runner.invoke(cli, ["console"])

        assert result.exit_code == 0, result.output
        assert "Access Key: ASIATEST123" in result.output
        assert "Secret Key: test-secret" in result.output
        assert "Session Token: test-token" in result.output
        assert f"URL: {LOGIN_URL}" in result.output
        assert sample_credentials.local_expiration() in result.output
        mock_url.assert_called_once_with(sample_credentials)

    @patch("core.federation.signin.get_console_url")
    @patch("core.auth.sts.request_federation_token")
    def test_defaults(self, mock_request, mock_url, runner, workdir, sample_credentials):
        """기본 사용자/기간/리전과 policy.json 내용 전달"""
        mock_request.return_value = sample_credentials
        mock_url.return_value = LOGIN_URL

        runner.invoke(cli, ["console"])

        mock_request.assert_called_once_with(
            None,
            "test-user",
            900,
            '{"Version":"2012-10-17","Statement":[]}',
            region="us-west-2",
        )

    @patch("core.federation.signin.get_console_url")
    @patch("core.auth.sts.request_federation_token")
    def test_options(self, mock_request, mock_url, runner, workdir, sample_credentials):
        mock_request.return_value = sample_credentials
        mock_url.return_value = LOGIN_URL

        result = runner.invoke(cli, ["console", "-p", "prod", "-u", "alice", "-x", "3600", "-r", "eu-west-1"])

        assert result.exit_code == 0, result.output
        args, kwargs = mock_request.call_args
        assert args[:3] == ("prod", "alice", 3600)
        assert kwargs == {"region": "eu-west-1"}

    @patch("core.federation.signin.get_console_url")
    @patch("core.auth.sts.request_federation_token")
    def test_missing_policy_uses_default(self, mock_request, mock_url, runner, tmp_path, monkeypatch, sample_credentials):
        """정책 파일이 없으면 기본 정책 + 경고"""
        from core.federation.policy import DEFAULT_POLICY

        monkeypatch.chdir(tmp_path)
        mock_request.return_value = sample_credentials
        mock_url.return_value = LOGIN_URL

        result = runner.invoke(cli, ["console"])

        assert result.exit_code == 0, result.output
        assert mock_request.call_args.args[3] == DEFAULT_POLICY
        assert "policy.json" in result.output

    @patch("core.federation.signin.get_console_url")
    @patch("core.auth.sts.request_federation_token")
    def test_json_output(self, mock_request, mock_url, runner, workdir, sample_credentials):
        mock_request.return_value = sample_credentials
        mock_url.return_value = LOGIN_URL

        result = runner.invoke(cli, ["console", "-f", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["AccessKeyId"] == "ASIATEST123"
        assert data["ConsoleUrl"] == LOGIN_URL
        assert data["Expiration"] == "2030-01-02T03:04:05+00:00"

    def test_export_not_supported(self, runner, workdir):
        """console 명령어는 export 형식 없음"""
        result = runner.invoke(cli, ["console", "-f", "export"])
        assert result.exit_code == 2

    @patch("core.federation.signin.get_console_url")
    @patch("core.auth.sts.request_federation_token")
    def test_signin_token_failure(self, mock_request, mock_url, runner, workdir, sample_credentials):
        """SigninToken 실패 시 종료 코드 1, 자격증명 출력 없음"""
        mock_request.return_value = sample_credentials
        mock_url.side_effect = SigninTokenError("응답이 유효한 JSON이 아닙니다")

        result = runner.invoke(cli, ["console"])

        assert result.exit_code == 1
        assert "JSON" in result.output
        assert "ASIATEST123" not in result.output

    @patch("core.federation.signin.requests.get")
    @patch("core.auth.session.boto3.Session")
    def test_end_to_end(self, mock_session_cls, mock_get, runner, workdir, mock_boto3_session):
        """STS → 페더레이션 엔드포인트 → 로그인 URL"""
        mock_session_cls.return_value = mock_boto3_session
        mock_get.return_value.ok = True
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = {"SigninToken": "tok"}

        result = runner.invoke(cli, ["console", "-f", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["AccessKeyId"] == "ASIAFED123"
        assert data["ConsoleUrl"] == LOGIN_URL


# =============================================================================
# federate 명령어 테스트
# =============================================================================


class TestFederateCommand:
    """fed federate 테스트"""

    @patch("core.auth.sts.request_federation_token")
    def test_text_output(self, mock_request, runner, workdir, sample_credentials):
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["federate"])

        assert result.exit_code == 0, result.output
        assert "Access Key: ASIATEST123" in result.output
        assert "URL:" not in result.output

    @patch("core.auth.sts.request_federation_token")
    def test_expiry_label_default_language(self, mock_request, runner, workdir, sample_credentials):
        """기본 언어에서도 만료 라벨은 그대로"""
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["federate"])

        assert result.exit_code == 0, result.output
        assert f"Credentials expires at: {sample_credentials.local_expiration()}" in result.output

    @patch("core.auth.sts.request_federation_token")
    def test_export_output(self, mock_request, runner, workdir, sample_credentials):
        """export 형식은 한 줄만 출력"""
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["federate", "-f", "export"])

        assert result.exit_code == 0, result.output
        assert result.output == (
            "export AWS_ACCESS_KEY_ID=ASIATEST123; "
            "export AWS_SECRET_ACCESS_KEY=test-secret; "
            "export AWS_SESSION_TOKEN=test-token;\n"
        )

    @patch("core.auth.sts.request_federation_token")
    def test_export_with_region(self, mock_request, runner, workdir, sample_credentials):
        """-r 지정 시에만 AWS_DEFAULT_REGION 포함"""
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["federate", "-f", "export", "-r", "eu-central-1"])

        assert result.output.strip().endswith("export AWS_DEFAULT_REGION=eu-central-1;")

    @patch("core.auth.sts.request_federation_token")
    def test_profile_from_env(self, mock_request, runner, workdir, sample_credentials, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "env-profile")
        mock_request.return_value = sample_credentials

        runner.invoke(cli, ["federate"])

        assert mock_request.call_args.args[0] == "env-profile"

    @patch("core.auth.sts.request_federation_token")
    def test_region_from_env(self, mock_request, runner, workdir, sample_credentials, monkeypatch):
        """환경변수 리전은 STS 호출에만 사용하고 export에는 넣지 않음"""
        monkeypatch.setenv("AWS_REGION", "ap-northeast-2")
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["federate", "-f", "export"])

        assert mock_request.call_args.kwargs["region"] == "ap-northeast-2"
        assert "AWS_DEFAULT_REGION" not in result.output

    @patch("core.auth.sts.request_federation_token")
    def test_api_error(self, mock_request, runner, workdir):
        """STS 거부 시 친절한 메시지 + 종료 코드 1"""
        mock_request.side_effect = APICallError(
            "sts", "get_federation_token", "MalformedPolicyDocument", "Syntax errors in policy."
        )

        result = runner.invoke(cli, ["federate"])

        assert result.exit_code == 1
        assert "정책 문서가 올바르지 않습니다." in result.output
        assert "Syntax errors in policy." in result.output

    def test_duration_validation(self, runner, workdir):
        """범위를 벗어난 기간은 STS 호출 전 실패"""
        result = runner.invoke(cli, ["federate", "-x", "60"])

        assert result.exit_code == 1
        assert "duration" in result.output

    def test_invalid_policy_file(self, runner, workdir):
        (workdir / "policy.json").write_text("{broken", encoding="utf-8")

        result = runner.invoke(cli, ["federate"])

        assert result.exit_code == 1
        assert "policy.json" in result.output

    def test_english_output(self, runner, workdir, sample_credentials):
        """--lang en"""
        with patch("core.auth.sts.request_federation_token", return_value=sample_credentials):
            result = runner.invoke(cli, ["--lang", "en", "federate"])

        assert result.exit_code == 0, result.output
        assert "Credentials expires at:" in result.output


# =============================================================================
# session 명령어 테스트
# =============================================================================


class TestSessionCommand:
    """fed session 테스트"""

    @patch("core.auth.sts.request_session_token")
    def test_defaults(self, mock_request, runner, sample_credentials):
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["session"])

        assert result.exit_code == 0, result.output
        mock_request.assert_called_once_with(None, "us-west-2", 3600, mfa_code=None, mfa_serial=None)
        assert "Session Token: test-token" in result.output

    @patch("core.auth.sts.request_session_token")
    def test_mfa_options(self, mock_request, runner, sample_credentials):
        mock_request.return_value = sample_credentials

        result = runner.invoke(
            cli,
            ["session", "-p", "dev", "-m", "123456", "--mfa-serial", "arn:aws:iam::1:mfa/me", "-x", "7200"],
        )

        assert result.exit_code == 0, result.output
        mock_request.assert_called_once_with(
            "dev", "us-west-2", 7200, mfa_code="123456", mfa_serial="arn:aws:iam::1:mfa/me"
        )

    @patch("core.auth.sts.request_session_token")
    def test_json_output(self, mock_request, runner, sample_credentials):
        mock_request.return_value = sample_credentials

        result = runner.invoke(cli, ["session", "--format", "json"])

        data = json.loads(result.output)
        assert set(data) == {"AccessKeyId", "SecretAccessKey", "SessionToken", "Expiration"}

    @patch("core.auth.sts.request_session_token")
    def test_configuration_error(self, mock_request, runner):
        mock_request.side_effect = ConfigurationError("MFA 디바이스를 찾을 수 없습니다", config_key="mfa_serial")

        result = runner.invoke(cli, ["session", "-m", "123456"])

        assert result.exit_code == 1
        assert "MFA 디바이스를 찾을 수 없습니다" in result.output

    def test_invalid_region(self, runner, aws_profile_files):
        """잘못된 리전은 클라이언트 생성 단계에서 실패해도 종료 코드 1"""
        result = runner.invoke(cli, ["session", "-p", aws_profile_files, "-r", "bad region!"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "get_session_token" in result.output

    @patch("core.auth.session.boto3.Session")
    def test_mfa_lookup_transport_error(self, mock_session_cls, runner, mock_boto3_session):
        """IAM MFA 조회 중 연결 실패"""
        mock_session_cls.return_value = mock_boto3_session
        mock_boto3_session.client.return_value.list_mfa_devices.side_effect = EndpointConnectionError(
            endpoint_url="https://iam.amazonaws.com"
        )

        result = runner.invoke(cli, ["session", "-m", "123456"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "list_mfa_devices" in result.output

    def test_invalid_mfa_code(self, runner):
        result = runner.invoke(cli, ["session", "-m", "12"])

        assert result.exit_code == 1
        assert "mfa_code" in result.output

    def test_moto_export(self, runner, moto_aws):
        """moto STS로 export 문자열 생성"""
        result = runner.invoke(cli, ["session", "-p", moto_aws, "-f", "export"])

        assert result.exit_code == 0, result.output
        assert result.output.startswith("export AWS_ACCESS_KEY_ID=")
        assert result.output.count("export ") == 3
