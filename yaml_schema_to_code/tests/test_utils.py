import pytest

from yaml_schema_to_code.utils import sanitize_file_name, snake_to_camel_case, snake_to_pascal_case, upper_first


@pytest.mark.parametrize(
    "text, expected",
    [
        ("user_account", "UserAccount"),
        ("orderItem", "OrderItem"),
        ("order-line-2", "OrderLine2"),
        ("", ""),
    ],
)
def test_snake_to_pascal_case(text, expected):
    assert snake_to_pascal_case(text) == expected


def test_snake_to_camel_case():
    assert snake_to_camel_case("user_account") == "userAccount"
    assert snake_to_camel_case("") == ""


def test_upper_first():
    assert upper_first("userId") == "UserId"
    assert upper_first("u") == "U"
    assert upper_first("") == ""


def test_sanitize_file_name():
    assert sanitize_file_name("billing/invoice") == "billing_invoice"
    assert sanitize_file_name("a\\b/c") == "a_b_c"
    assert sanitize_file_name("user") == "user"
