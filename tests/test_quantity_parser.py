from recipe_ingest.app.services.url_parsing.quantity_parser import parse_quantity


def test_parse_quantity_valid():
    assert parse_quantity("1") == 1.0
    assert parse_quantity("0.5") == 0.5
    assert parse_quantity("1/2") == 0.5
    assert parse_quantity("1 1/2") == 1.5


def test_parse_quantity_unicode_fractions():
    assert parse_quantity("½") == 0.5
    assert parse_quantity("1½") == 1.5
    assert parse_quantity("1 ¼") == 1.25
    assert parse_quantity("1⁄4") == 0.25


def test_parse_quantity_invalid():
    assert parse_quantity(None) is None
    assert parse_quantity("") is None
    assert parse_quantity("   ") is None
    assert parse_quantity("1/0") is None
    assert parse_quantity("abc") is None
    assert parse_quantity("1-2") is None
