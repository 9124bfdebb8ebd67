import pytest
import requests

from menurec.data import loader
from menurec.data.errors import FormatError, SchemaError, TransportError, UnsupportedFileError
from menurec.data.loader import (
    check_schema, detect_delimiter, fetch_source, load_menu_text, parse_csv_text, validate_upload,
)

from tests.conftest import MENU_CSV


def test_detect_delimiter_from_filename():
    assert detect_delimiter("data/menulovis.csv") == ";"
    assert detect_delimiter("MenuLOVIS_export.csv") == ";"
    assert detect_delimiter("menu.csv") == ","
    assert detect_delimiter("") == ","
    assert detect_delimiter("menu-semi.csv", markers=["semi"]) == ";"


@pytest.mark.parametrize("filename,content_type", [
    ("menu.csv", None),
    ("MENU.CSV", "application/octet-stream"),
    ("export", "text/csv"),
    ("export.txt", "text/csv; charset=utf-8"),
])
def test_validate_upload_accepts_csv(filename, content_type):
    validate_upload(filename, content_type)


@pytest.mark.parametrize("filename,content_type", [
    ("menu.xlsx", "application/vnd.ms-excel"),
    ("menu.json", "application/json"),
    ("", "text/csv"),
    (None, None),
])
def test_validate_upload_rejects_other_files(filename, content_type):
    with pytest.raises(UnsupportedFileError):
        validate_upload(filename, content_type)


def test_parse_keeps_raw_strings():
    df = parse_csv_text("Name,Category,Flavor,Price\nA, B ,C,\n\nD,E,F,NA\n")
    assert df.columns.tolist() == ["Name", "Category", "Flavor", "Price"]
    assert df["Category"].tolist() == [" B ", "E"]
    assert df["Price"].tolist() == ["", "NA"]


def test_parse_errors_are_format_errors():
    with pytest.raises(FormatError):
        parse_csv_text("Name,Category,Flavor\n\"A,B,C\n")
    with pytest.raises(FormatError):
        parse_csv_text("   \n")


def test_row_with_extra_fields_is_format_error():
    # unquoted comma in a description
    with pytest.raises(FormatError):
        parse_csv_text("Name,Category,Flavor,Description\nA,B,C,Hot, fresh\n")
    with pytest.raises(FormatError):
        load_menu_text("Name,Category,Flavor\nA,B,C,D\n", "menu.csv")


def test_check_schema_reports_missing_columns():
    check_schema([" Name", "Category ", "Flavor"])
    with pytest.raises(SchemaError) as exc:
        check_schema(["Name", "Description"])
    assert exc.value.missing == ["Category", "Flavor"]
    assert "Category, Flavor" in str(exc.value)


def test_load_menu_text():
    items, dropped = load_menu_text(MENU_CSV, "menu.csv")

    assert [i.name for i in items] == ["Espresso", "Tea", "Pizza", "Latte"]
    assert dropped == 2
    assert items[0].category == "Beverage"
    assert items[1].flavor == "Refreshing"
    assert [i.price for i in items] == [2.5, 1.75, 1200.0, None]
    assert items[0].description == "Short and dark"


def test_load_menu_text_semicolon_file():
    text = "Name;Category;Flavor;Description\nEspresso;Beverage;Strong;Dark, bitter\n"
    items, _ = load_menu_text(text, "menulovis.csv")
    assert items[0].description == "Dark, bitter"


def test_load_menu_text_header_only():
    assert load_menu_text("Name,Category,Flavor\n", "menu.csv") == ([], 0)


def test_load_menu_text_missing_columns():
    with pytest.raises(SchemaError):
        load_menu_text("Name,Flavor\nA,B\n", "menu.csv")


def test_fetch_local_file(menu_csv_path):
    assert fetch_source(str(menu_csv_path)) == MENU_CSV


def test_fetch_missing_file(tmp_path):
    with pytest.raises(TransportError):
        fetch_source(str(tmp_path / "nope.csv"))


class _FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self.text = text
        self.encoding = "utf-8"


def test_fetch_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse(200, "Name,Category,Flavor\nA,B,C\n")

    monkeypatch.setattr(loader.requests, "get", fake_get)
    assert fetch_source("https://example.com/menu.csv", timeout=3) == "Name,Category,Flavor\nA,B,C\n"
    assert calls == [("https://example.com/menu.csv", 3)]


def test_fetch_url_bad_status(monkeypatch):
    monkeypatch.setattr(loader.requests, "get", lambda url, timeout: _FakeResponse(404))
    with pytest.raises(TransportError, match="404"):
        fetch_source("http://example.com/menu.csv")


def test_fetch_url_unreachable(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(loader.requests, "get", boom)
    with pytest.raises(TransportError, match="connection refused"):
        fetch_source("http://example.com/menu.csv")
