import json

import pytest

from flaghunt.Catalog import (
    CatalogError,
    DEFAULT_CATALOG,
    load_catalog,
    parse_catalog,
    resolve_catalog,
    validate_catalog,
    world_catalog,
)
from flaghunt.Classes.Country import Country

def test_default_catalog_is_valid():
    assert validate_catalog(DEFAULT_CATALOG) == DEFAULT_CATALOG

def test_validate_rejects_small_catalog(catalog):
    with pytest.raises(CatalogError, match="at least 4"):
        validate_catalog(catalog[:3])

def test_validate_rejects_duplicate_codes(catalog):
    with pytest.raises(CatalogError, match="aa"):
        validate_catalog([*catalog, Country("aa", "Aland twin")])

def test_parse_normalises_entries():
    countries = parse_catalog([
        {"code": " FR ", "name": " France "},
        {"code": "de", "name": "Germany"},
        {"code": "it", "name": "Italy"},
        {"code": "es", "name": "Spain"},
    ])

    assert countries[0] == Country("fr", "France")

def test_parse_rejects_incomplete_entry():
    with pytest.raises(CatalogError, match="#2"):
        parse_catalog([{"code": "fr", "name": "France"}, {"code": "de"}])

def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps([{"code": code, "name": name} for code, name in [
        ("fr", "France"), ("de", "Germany"), ("it", "Italy"), ("es", "Spain"), ("pt", "Portugal"),
    ]]), encoding="utf-8")

    countries = load_catalog(str(path))

    assert len(countries) == 5
    assert countries[-1] == Country("pt", "Portugal")

def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogError, match="Could not read"):
        load_catalog(str(tmp_path / "missing.json"))

def test_load_catalog_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(CatalogError, match="not valid JSON"):
        load_catalog(str(path))

def test_load_catalog_needs_a_list(tmp_path):
    path = tmp_path / "object.json"
    path.write_text('{"fr": "France"}', encoding="utf-8")

    with pytest.raises(CatalogError, match="JSON list"):
        load_catalog(str(path))

def test_world_catalog():
    countries = world_catalog()

    assert len(countries) > 200
    assert Country("fr", "France") in countries
    assert all(country.code == country.code.lower() for country in countries)

def test_resolve_prefers_file_then_world(tmp_path):
    assert resolve_catalog(None, False) == DEFAULT_CATALOG
    assert len(resolve_catalog(None, True)) > len(DEFAULT_CATALOG)

    path = tmp_path / "countries.json"
    path.write_text(json.dumps([{"code": c, "name": c.upper()} for c in ["aa", "bb", "cc", "dd"]]), encoding="utf-8")
    assert len(resolve_catalog(str(path), True)) == 4
