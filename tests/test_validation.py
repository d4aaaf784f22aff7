import pytest
from domain.models import Credentials
from domain.settings import Settings
from services.validation import (
    is_name_valid,
    is_valid_date_of_birth,
    is_valid_email,
    login_gate,
    registration_gate,
    validate_registration,
)


def make_registration(**overrides):
    values = dict(first_name="Ada", last_name="Lovelace", date_of_birth="12/10/1815",
                  email="ada@example.com", password="analytical")
    values.update(overrides)
    return Credentials(**values)


@pytest.mark.parametrize("length,expected", [
    (0, False), (2, False), (3, True), (15, True), (30, True), (31, False),
])
def test_name_length_bounds_are_inclusive(length, expected):
    assert is_name_valid("x" * length) is expected


def test_name_counts_code_points_without_charset_rules():
    assert is_name_valid("李小龍")
    assert is_name_valid("   ")
    assert not is_name_valid("éé")
    # A decomposed é is two code points
    assert is_name_valid("ée")


def test_name_bounds_can_be_overridden():
    assert is_name_valid("ab", min_length=2, max_length=4)
    assert not is_name_valid("abcde", min_length=2, max_length=4)


@pytest.mark.parametrize("value,expected", [
    ("01/02/2000", True),
    ("99/99/9999", True),
    ("13/45/2020", True),
    ("1/2/2000", False),
    ("01/02/200", False),
    ("01-02-2000", False),
    (" 01/02/2000", False),
    ("01/02/2000 ", False),
    ("01/02/2000\n", False),
    ("٠١/٠٢/٢٠٠٠", False),  # Arabic-Indic digits
    ("", False),
])
def test_date_of_birth_shape(value, expected):
    assert is_valid_date_of_birth(value) is expected


@pytest.mark.parametrize("value,expected", [
    ("ada@example.com", True),
    ("first.last+tag@sub.example.co", True),
    ("ada@example", False),
    ("ada.example.com", False),
    ("@example.com", False),
    ("ada@@example.com", False),
    ("ada@example.com trailing", False),
    ("", False),
])
def test_email_default_matcher(value, expected):
    assert is_valid_email(value) is expected


def test_email_custom_matcher_is_used():
    assert is_valid_email("anything", matcher=lambda v: v == "anything")
    assert not is_valid_email("ada@example.com", matcher=lambda v: False)


def test_email_matcher_failure_degrades_to_false(caplog):
    def broken(_value):
        raise RuntimeError("matcher exploded")

    with caplog.at_level("WARNING"):
        assert is_valid_email("ada@example.com", matcher=broken) is False
    assert "Email matcher failed" in caplog.text


def test_email_non_string_is_invalid():
    assert is_valid_email(None) is False


def test_login_gate_requires_both_fields():
    assert login_gate(Credentials(username="bob", password="pwd"))
    assert not login_gate(Credentials(username="bob", password="pw"))
    for password in ("", "pwd", "x" * 30, "x" * 31):
        assert not login_gate(Credentials(username="ab", password=password))


def test_login_gate_uses_settings_bounds():
    settings = Settings(name_min_length=5, name_max_length=8)
    assert not login_gate(Credentials(username="bob", password="pwd"), settings)
    assert login_gate(Credentials(username="bobby", password="secret"), settings)


def test_registration_gate_accepts_valid_form():
    assert registration_gate(make_registration())


def test_registration_gate_has_no_calendar_semantics():
    assert registration_gate(make_registration(date_of_birth="13/45/2020"))


@pytest.mark.parametrize("field,bad_value", [
    ("first_name", "Al"),
    ("last_name", "L" * 31),
    ("date_of_birth", "1/2/2000"),
    ("email", "not-an-email"),
    ("password", "pw"),
])
def test_registration_gate_fails_when_any_field_is_invalid(field, bad_value):
    creds = make_registration(**{field: bad_value})
    result = validate_registration(creds)
    assert not registration_gate(creds)
    assert result.form_valid is False
    # Only the flipped field is reported, the others are still evaluated.
    assert [name for name, ok in result.fields.items() if not ok] == [field]


def test_registration_ignores_login_only_field():
    # username is not part of the registration form
    assert registration_gate(make_registration(username=""))


@pytest.mark.parametrize("value", [None, 123, b"01/02/2000", ["abc"]])
def test_validators_return_false_for_non_strings(value):
    assert is_name_valid(value) is False
    assert is_valid_date_of_birth(value) is False
    assert is_valid_email(value) is False
