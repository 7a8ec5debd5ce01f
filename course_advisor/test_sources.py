import pytest
import requests

from course_advisor import sources
from course_advisor.catalog import load
from course_advisor.diagnostics import SourceUnreadable
from course_advisor.sources import is_url, line_reader, read_lines


class FakeResponse:
    def __init__(self, text, status_code=200, headers=None):
        self.text = text
        self.status_code = status_code
        self.headers = headers or {"Content-Type": "text/plain; charset=utf-8"}
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response):
        def get(url, headers=None, timeout=None):
            calls.append((url, timeout))
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(sources.requests, "get", get)
        return calls

    return install


def test_is_url():
    assert is_url("https://example.edu/courses.csv")
    assert is_url(" HTTP://example.edu/x")
    assert not is_url("data/courses.csv")
    assert not is_url(["http://example.edu"])


def test_read_file_lines(tmp_path):
    path = tmp_path / "c.csv"
    path.write_text("A1,First\r\nB2,Second\n", encoding="utf-8")
    assert [line.strip() for line in read_lines(str(path))] == ["A1,First", "B2,Second"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(SourceUnreadable) as info:
        read_lines(str(tmp_path / "nope.csv"))
    assert "nope.csv" in str(info.value)
    assert isinstance(info.value.cause, OSError)


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(SourceUnreadable):
        read_lines(str(tmp_path))


def test_url_is_fetched_once_per_pass(fake_get):
    calls = fake_get(FakeResponse("CS101,Intro\nCS201,Next,CS101\n"))
    result = load("https://example.edu/courses.csv", timeout=3)
    assert sorted(result.table) == ["CS101", "CS201"]
    assert calls == [("https://example.edu/courses.csv", 3)] * 2


def test_http_error_is_unreadable(fake_get):
    fake_get(FakeResponse("not found", status_code=404))
    result = load("https://example.edu/missing.csv")
    assert result.table == {}
    assert result.diagnostics == []
    assert isinstance(result.error.cause, requests.HTTPError)


def test_connection_error_is_unreadable(fake_get):
    fake_get(requests.ConnectionError("refused"))
    with pytest.raises(SourceUnreadable):
        read_lines("http://example.edu/courses.csv")


def test_missing_charset_uses_configured_encoding(fake_get):
    response = FakeResponse("CS101,Intro\n", headers={"Content-Type": "text/plain"})
    fake_get(response)
    read_lines("http://example.edu/courses.csv", encoding="utf-8")
    assert response.encoding == "utf-8"


def test_line_reader_materializes_iterables():
    read = line_reader(line for line in ["A1,First"])
    assert read() == ["A1,First"]
    assert read() == ["A1,First"]


def test_line_reader_rejects_bytes():
    with pytest.raises(TypeError):
        line_reader(b"A1,First")


def test_unknown_encoding_is_unreadable(tmp_path):
    path = tmp_path / "c.csv"
    path.write_text("A1,First\n", encoding="utf-8")
    with pytest.raises(SourceUnreadable):
        read_lines(str(path), encoding="no-such-codec")
