"""
Name: Helper Tests

Responsibilities:
  - Link type detection by domain
  - Upload filename handling
"""

import pytest

from app.utils.helpers import detect_link_type, sanitize_filename, unique_upload_name
from app.utils.validators import validate_file_extension

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://www.linkedin.com/jobs/view/123", "LinkedIn"),
        ("https://twitter.com/acme/status/1", "Twitter"),
        ("https://x.com/acme/status/1", "Twitter"),
        ("https://instagram.com/p/abc", "Instagram"),
        ("https://github.com/acme/jobs", "GitHub"),
        ("https://careers.acme.com/apply", "Other"),
        ("https://www.dropbox.com/s/jd.pdf", "Other"),
        ("not a url", "Other"),
        ("", "Other"),
    ],
)
def test_detect_link_type(url, expected):
    assert detect_link_type(url) == expected


def test_validate_file_extension():
    assert validate_file_extension("cv.PDF", ["pdf", "docx"])
    assert validate_file_extension("cv.docx", [".pdf", ".docx"])
    assert not validate_file_extension("cv.exe", ["pdf", "docx"])
    assert not validate_file_extension("cv", ["pdf"])
    assert not validate_file_extension("", ["pdf"])


def test_sanitize_filename_strips_path_characters():
    assert sanitize_filename("../my cv (final).pdf") == "..my_cv_final.pdf"


def test_unique_upload_name_keeps_extension():
    first = unique_upload_name("resume", "My CV.PDF")
    second = unique_upload_name("resume", "My CV.PDF")

    assert first.startswith("resume-")
    assert first.endswith(".pdf")
    assert first != second
