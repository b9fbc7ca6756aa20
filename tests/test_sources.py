# ==============================================
# Tests for Sources (CSV columns / HTTP)
# ==============================================

import pytest
import requests

from shapegen.sources import fetch_samples, read_as_columns, read_column, read_lines


CSV_DATA = (
    '"firstname","lastname"\n'
    '"Aaron","Aaberg"\n'
    '"Aaron","Aaby"\n'
    '"Abbey","Aadland"\n'
    '"Abbie","Aagaard"\n'
    '"Abby","Aakre"'
)


# ==============================================
# Column Splitting Tests
# ==============================================

class TestReadAsColumns:
    """Tests for splitting CSV text into columns."""

    def test_split_into_columns(self):
        """Headers come from row one; each column keeps row order."""
        headers, columns = read_as_columns(CSV_DATA)
        assert headers == ["firstname", "lastname"]
        assert columns[0] == ["Aaron", "Aaron", "Abbey", "Abbie", "Abby"]
        assert columns[1] == ["Aaberg", "Aaby", "Aadland", "Aagaard", "Aakre"]

    def test_ragged_rows_add_columns(self):
        """Longer rows open new columns."""
        _, columns = read_as_columns("a\nb,c\nd,e,f\n", has_headers=False)
        assert columns == [["a", "b", "d"], ["c", "e"], ["f"]]

    def test_custom_delimiter_and_doubled_quotes(self):
        """Doubled quotes inside a quoted field become one quote."""
        headers, columns = read_as_columns('name;note\n"O\'Brian";"say ""hi"""\n', delimiter=";")
        assert headers == ["name", "note"]
        assert columns == [["O'Brian"], ['say "hi"']]


# ==============================================
# File Reading Tests
# ==============================================

class TestReadColumn:
    """Tests for reading one column of a CSV file."""

    @pytest.fixture
    def csv_file(self, tmp_path):
        """CSV_DATA plus a row of empty cells."""
        path = tmp_path / "names.csv"
        path.write_text(CSV_DATA + '\n"",""\n', encoding="utf-8")
        return path

    def test_by_name(self, csv_file):
        """Columns can be selected by header name."""
        assert read_column(csv_file, "lastname")[:2] == ["Aaberg", "Aaby"]

    def test_by_index(self, csv_file):
        """Columns can be selected by 0-based index, as int or str."""
        assert read_column(csv_file, 0) == ["Aaron", "Aaron", "Abbey", "Abbie", "Abby"]
        assert read_column(csv_file, "1")[-1] == "Aakre"

    def test_empty_cells_skipped(self, csv_file):
        """Empty cells are dropped unless skip_empty=False."""
        assert len(read_column(csv_file, "firstname")) == 5
        assert len(read_column(csv_file, "firstname", skip_empty=False)) == 6

    def test_missing_column(self, csv_file):
        """Unknown names and out-of-range indexes raise KeyError."""
        with pytest.raises(KeyError):
            read_column(csv_file, "middlename")
        with pytest.raises(KeyError):
            read_column(csv_file, 5)

    def test_byte_order_mark_ignored(self, tmp_path):
        """A UTF-8 BOM does not hide the first header name."""
        path = tmp_path / "excel.csv"
        path.write_text("\ufeff" + CSV_DATA, encoding="utf-8")
        assert read_column(path, "firstname")[0] == "Aaron"


class TestReadLines:
    """Tests for one-sample-per-line text files."""

    def test_one_sample_per_line(self, tmp_path):
        """Blank lines are skipped and line endings stripped."""
        path = tmp_path / "dates.txt"
        path.write_text("01/13/2017\n\n11/24/2017\r\n08/05/2017\n", encoding="utf-8")
        assert read_lines(path) == ["01/13/2017", "11/24/2017", "08/05/2017"]

    def test_byte_order_mark_ignored(self, tmp_path):
        """A UTF-8 BOM is not part of the first sample."""
        path = tmp_path / "dates.txt"
        path.write_text("\ufeff01/13/2017\n", encoding="utf-8")
        assert read_lines(path) == ["01/13/2017"]


# ==============================================
# HTTP Source Tests
# ==============================================

class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def fake_get(responses, calls):
    """requests.get replacement that records calls and replays responses."""
    def get(url, timeout=None):
        calls.append((url, timeout))
        return responses.pop(0) if responses else FakeResponse([])
    return get


class TestFetchSamples:
    """Tests for fetch_samples."""

    def test_list_payload(self, monkeypatch):
        """A JSON list yields its strings, up to count."""
        calls = []
        monkeypatch.setattr(requests, "get", fake_get([FakeResponse(["Smith, John", "Dale, Danny", 7])], calls))

        assert fetch_samples("http://example.test/samples", count=2, timeout=3.0) == [
            "Smith, John", "Dale, Danny"
        ]
        assert calls == [("http://example.test/samples", 3.0)]

    def test_object_payload(self, monkeypatch):
        """A {"samples": [...]} object is unwrapped."""
        calls = []
        monkeypatch.setattr(requests, "get", fake_get([FakeResponse({"samples": ["Po, Al"]})], calls))
        assert fetch_samples("http://example.test", count=1) == ["Po, Al"]

    def test_one_string_per_call(self, monkeypatch):
        """A bare string payload is one sample per request."""
        calls = []
        responses = [FakeResponse("a1"), FakeResponse("b2"), FakeResponse("c3")]
        monkeypatch.setattr(requests, "get", fake_get(responses, calls))

        assert fetch_samples("http://example.test", count=3) == ["a1", "b2", "c3"]
        assert len(calls) == 3

    def test_stops_when_endpoint_runs_dry(self, monkeypatch):
        """An empty payload ends the fetch early."""
        calls = []
        monkeypatch.setattr(requests, "get", fake_get([FakeResponse(["only"])], calls))
        assert fetch_samples("http://example.test", count=10) == ["only"]

    def test_http_error_propagates(self, monkeypatch):
        """HTTP error statuses raise requests exceptions."""
        calls = []
        monkeypatch.setattr(requests, "get", fake_get([FakeResponse(None, status_code=503)], calls))
        with pytest.raises(requests.RequestException):
            fetch_samples("http://example.test", count=1)

    def test_negative_count(self):
        """A negative count is rejected."""
        with pytest.raises(ValueError):
            fetch_samples("http://example.test", count=-1)
