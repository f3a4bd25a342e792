import pytest

from safety.exceptions import ProductNameError
from safety.validation import (
    MESSAGES,
    ProductName,
    ProductNameErrorKind,
    client_rules,
    validate_product_name,
)


def kind_of(value):
    with pytest.raises(ProductNameError) as exc_info:
        validate_product_name(value)
    return exc_info.value.kind


@pytest.mark.parametrize("value", [None, "", 42, ["Bleach"], {"name": "Bleach"}])
def test_missing_or_non_string(value):
    assert kind_of(value) is ProductNameErrorKind.MISSING


@pytest.mark.parametrize("value", ["x", " ", "   a   ", "\n\t"])
def test_too_short_after_trimming(value):
    assert kind_of(value) is ProductNameErrorKind.TOO_SHORT


def test_too_long_uses_raw_length():
    assert kind_of("a" * 101) is ProductNameErrorKind.TOO_LONG
    assert kind_of("ab" + " " * 99) is ProductNameErrorKind.TOO_LONG


def test_exactly_max_length_is_accepted():
    assert validate_product_name("a" * 100) == ProductName("a" * 100)


@pytest.mark.parametrize("value", ["Bomb", "bath BOMB", "Smoke bOmB kit", "Weed Poison", "explosive cleaner"])
def test_denylisted_terms_any_case(value):
    assert kind_of(value) is ProductNameErrorKind.DISALLOWED


def test_length_checks_run_before_denylist():
    assert kind_of("b") is ProductNameErrorKind.TOO_SHORT
    assert kind_of("bomb" + "a" * 100) is ProductNameErrorKind.TOO_LONG


def test_valid_name_is_trimmed():
    name = validate_product_name("  Baking Soda  ")
    assert name.value == "Baking Soda"
    assert str(name) == "Baking Soda"


def test_product_name_is_immutable():
    name = validate_product_name("Bleach")
    with pytest.raises(AttributeError):
        name.value = "Ammonia"


def test_error_carries_user_message():
    with pytest.raises(ProductNameError) as exc_info:
        validate_product_name("x")
    assert exc_info.value.message == "Product name is too short"
    assert str(exc_info.value) == "Product name is too short"


def test_client_rules_mirror_server_rules():
    rules = client_rules()
    assert rules["minLength"] == 2
    assert rules["maxLength"] == 100
    assert "bomb" in rules["denylist"]
    assert rules["messages"]["disallowed"] == MESSAGES[ProductNameErrorKind.DISALLOWED]
