from decimal import Decimal

from product_api.schemas import ProductIn
from product_api.validation import validate_product, validate_products


def _product(**overrides):
    data = {"name": "Pen", "description": "Blue ink pen", "price": Decimal("1.50")}
    data.update(overrides)
    return ProductIn(**data)


def test_valid_product_has_no_violations():
    assert validate_product(_product()) == {}


def test_boundaries_are_inclusive():
    candidate = _product(name="ab", description="x" * 500, price=Decimal("0.01"))
    assert validate_product(candidate) == {}
    candidate = _product(name="n" * 100, description="abcde")
    assert validate_product(candidate) == {}


def test_name_too_short():
    assert validate_product(_product(name="A")) == {"name": ["size must be between 2 and 100"]}


def test_name_too_long():
    assert "name" in validate_product(_product(name="n" * 101))


def test_short_blank_values_report_blank_and_size():
    violations = validate_product(_product(name=" ", description=""))
    assert violations == {
        "name": ["must not be blank", "size must be between 2 and 100"],
        "description": ["must not be blank", "size must be between 5 and 500"],
    }


def test_blank_value_within_size_reports_blank_only():
    assert validate_product(_product(name="   ")) == {"name": ["must not be blank"]}


def test_description_too_long():
    assert validate_product(_product(description="x" * 501)) == {
        "description": ["size must be between 5 and 500"]
    }


def test_missing_fields_are_all_reported():
    violations = validate_product(ProductIn())
    assert violations == {
        "name": ["must not be blank"],
        "description": ["must not be blank"],
        "price": ["must not be null"],
    }


def test_price_below_minimum():
    violations = validate_product(_product(price=Decimal("0.009")))
    assert violations == {"price": ["must be greater than or equal to 0.01"]}
    assert "price" in validate_product(_product(price=Decimal("-3")))


def test_description_too_short():
    assert validate_product(_product(description="abcd")) == {
        "description": ["size must be between 5 and 500"]
    }


def test_batch_violations_are_keyed_by_index():
    violations = validate_products([_product(), _product(name="A", price=Decimal("0"))])
    assert set(violations) == {"1.name", "1.price"}
