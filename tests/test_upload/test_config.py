"""Tests for upload service configuration."""

import pytest

from imagehost.upload.config import get_max_content_length


def test_max_content_length_unset(monkeypatch):
    monkeypatch.delenv("MAX_UPLOAD_MB", raising=False)

    assert get_max_content_length() is None


def test_max_content_length_in_megabytes(monkeypatch):
    monkeypatch.setenv("MAX_UPLOAD_MB", "2.5")

    assert get_max_content_length() == int(2.5 * 1024 * 1024)


@pytest.mark.parametrize("value", ["ten", "5MB", "-1", "0", "nan", "inf"])
def test_max_content_length_rejects_bad_values(monkeypatch, value):
    """A malformed limit names the variable in the error."""
    monkeypatch.setenv("MAX_UPLOAD_MB", value)

    with pytest.raises(ValueError, match="MAX_UPLOAD_MB"):
        get_max_content_length()
