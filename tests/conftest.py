"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_sts_client, sample_credentials):
        # mock_sts_client: get_federation_token/get_session_token 응답이 설정된 MagicMock
        # sample_credentials: TemporaryCredentials 인스턴스
        pass
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정

    실제 자격증명/프로파일이 테스트에 섞이지 않도록 AWS 관련 환경변수를 정리합니다.
    """
    for name in (
        "AWS_PROFILE",
        "AWS_DEFAULT_PROFILE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWSFED_LANG",
        "AWSFED_HTTP_TIMEOUT",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")

    from cli.i18n import set_lang

    set_lang("ko")
    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================

EXPIRATION = datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_credentials_response(prefix: str = "ASIATEST") -> dict:
    """STS Credentials 응답 생성 헬퍼"""
    return {
        "Credentials": {
            "AccessKeyId": f"{prefix}123",
            "SecretAccessKey": "test-secret",
            "SessionToken": "test-token",
            "Expiration": EXPIRATION,
        }
    }


@pytest.fixture
def mock_sts_client():
    """STS 클라이언트 모킹"""
    mock_client = MagicMock()

    federation = make_credentials_response("ASIAFED")
    federation["FederatedUser"] = {
        "FederatedUserId": "123456789012:test-user",
        "Arn": "arn:aws:sts::123456789012:federated-user/test-user",
    }
    mock_client.get_federation_token.return_value = federation
    mock_client.get_session_token.return_value = make_credentials_response("ASIASES")

    yield mock_client


@pytest.fixture
def mock_boto3_session(mock_sts_client):
    """boto3.Session 인스턴스 모킹 (STS 클라이언트 연결)"""
    mock_session = MagicMock()
    mock_session.region_name = "us-west-2"
    mock_session.client.return_value = mock_sts_client
    mock_session._session.get_scoped_config.return_value = {}
    return mock_session


@pytest.fixture
def sample_credentials():
    """테스트용 TemporaryCredentials"""
    from core.auth.types import TemporaryCredentials

    return TemporaryCredentials(
        access_key_id="ASIATEST123",
        secret_access_key="test-secret",
        session_token="test-token",
        expiration=EXPIRATION,
    )


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation,
    )


# =============================================================================
# moto 통합
# =============================================================================


@pytest.fixture
def aws_profile_files(tmp_path, monkeypatch):
    """임시 ~/.aws/credentials, ~/.aws/config 생성 ("moto-profile" 프로파일)"""
    credentials_file = tmp_path / "credentials"
    credentials_file.write_text(
        "[moto-profile]\naws_access_key_id = testing\naws_secret_access_key = testing\n",
        encoding="utf-8",
    )
    config_file = tmp_path / "config"
    config_file.write_text(
        "[profile moto-profile]\nregion = us-west-2\nmfa_serial = arn:aws:iam::123456789012:mfa/moto\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials_file))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config_file))
    return "moto-profile"


@pytest.fixture
def moto_aws(aws_profile_files):
    """moto를 사용한 STS/IAM 모킹"""
    import moto

    with moto.mock_aws():
        yield aws_profile_files


@pytest.fixture
def client_error():
    """ClientError 팩토리 픽스처"""
    return create_mock_client_error
