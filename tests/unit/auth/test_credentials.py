"""
Unit tests for service account credential and Drive service construction.
"""

import json
import pytest
from unittest.mock import Mock, patch

from src.google_drive_client.auth import credentials as credentials_module
from src.google_drive_client.auth.credentials import (
    SCOPES, get_service_account_credentials, get_drive_service, get_drive_discovery_document
)
from src.google_drive_client.exceptions import ConfigurationError


@pytest.mark.unit
@pytest.mark.auth
class TestServiceAccountCredentials:
    """Test cases for get_service_account_credentials."""

    @pytest.fixture
    def mock_service_account(self):
        with patch('src.google_drive_client.auth.credentials.service_account') as mock_sa:
            yield mock_sa

    @pytest.mark.parametrize("key", [None, "", "   ", "\n\t"])
    def test_missing_or_blank_key(self, key, mock_service_account):
        with pytest.raises(ConfigurationError, match="Service account key is required"):
            get_service_account_credentials(key)
        mock_service_account.Credentials.from_service_account_info.assert_not_called()

    def test_key_not_json(self, mock_service_account):
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            get_service_account_credentials("not-json")

    def test_key_not_json_object(self, mock_service_account):
        with pytest.raises(ConfigurationError, match="must be a JSON object"):
            get_service_account_credentials('["a", "b"]')

    def test_scoped_read_only(self, mock_service_account, sample_service_account_key):
        creds = Mock()
        mock_service_account.Credentials.from_service_account_info.return_value = creds

        result = get_service_account_credentials(sample_service_account_key)

        assert result is creds
        mock_service_account.Credentials.from_service_account_info.assert_called_once_with(
            json.loads(sample_service_account_key),
            scopes=["https://www.googleapis.com/auth/drive.readonly"]
        )
        creds.with_subject.assert_not_called()

    def test_default_scopes(self):
        assert SCOPES == ["https://www.googleapis.com/auth/drive.readonly"]

    def test_impersonation(self, mock_service_account, sample_service_account_key):
        creds = Mock()
        delegated = Mock()
        creds.with_subject.return_value = delegated
        mock_service_account.Credentials.from_service_account_info.return_value = creds

        result = get_service_account_credentials(sample_service_account_key, "user@example.com")

        assert result is delegated
        creds.with_subject.assert_called_once_with("user@example.com")

    @pytest.mark.parametrize("user", [None, "", "  "])
    def test_blank_impersonation_ignored(self, user, mock_service_account, sample_service_account_key):
        creds = Mock()
        mock_service_account.Credentials.from_service_account_info.return_value = creds

        assert get_service_account_credentials(sample_service_account_key, user) is creds
        creds.with_subject.assert_not_called()

    def test_library_errors_propagate(self, mock_service_account, sample_service_account_key):
        mock_service_account.Credentials.from_service_account_info.side_effect = ValueError("bad key")

        with pytest.raises(ValueError, match="bad key"):
            get_service_account_credentials(sample_service_account_key)


@pytest.mark.unit
@pytest.mark.auth
class TestDriveService:
    """Test cases for Drive resource construction."""

    @pytest.fixture(autouse=True)
    def clear_discovery_cache(self):
        get_drive_discovery_document.cache_clear()
        yield
        get_drive_discovery_document.cache_clear()

    @patch('src.google_drive_client.auth.credentials.get_static_doc')
    def test_discovery_document_loaded_once(self, mock_get_static_doc):
        mock_get_static_doc.return_value = '{"name": "drive"}'

        first = get_drive_discovery_document()
        second = get_drive_discovery_document()

        assert first == second == '{"name": "drive"}'
        mock_get_static_doc.assert_called_once_with("drive", "v3")

    @patch('src.google_drive_client.auth.credentials.build_from_document')
    @patch('src.google_drive_client.auth.credentials.get_static_doc')
    def test_get_drive_service_from_document(self, mock_get_static_doc, mock_build_from_document):
        mock_get_static_doc.return_value = '{"name": "drive"}'
        creds = Mock()

        service = get_drive_service(creds)

        assert service is mock_build_from_document.return_value
        mock_build_from_document.assert_called_once_with('{"name": "drive"}', credentials=creds)

    @patch('src.google_drive_client.auth.credentials.build')
    @patch('src.google_drive_client.auth.credentials.get_static_doc')
    def test_get_drive_service_without_bundled_document(self, mock_get_static_doc, mock_build):
        mock_get_static_doc.return_value = None
        creds = Mock()

        service = get_drive_service(creds)

        assert service is mock_build.return_value
        mock_build.assert_called_once_with("drive", "v3", credentials=creds, cache_discovery=False)

    def test_bundled_document_is_drive_v3(self):
        document = json.loads(credentials_module.get_drive_discovery_document())
        assert document["name"] == "drive"
        assert document["version"] == "v3"
