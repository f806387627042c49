"""Tests for the order payload builder."""

import threading

import pytest

from storefront.core.errors import ValidationError
from storefront.models.cart import CartLine
from storefront.models.order import CustomerInfo
from storefront.services.payload_builder import (
    MerchantReferenceGenerator,
    OrderDefaults,
    build_order_request,
    validate_customer_info,
)
from storefront.services.pricing import price_cart


@pytest.fixture
def priced(catalog):
    return price_cart(
        [CartLine(product_id="12345", quantity=1), CartLine(product_id="12346", quantity=3)],
        catalog,
    )


@pytest.fixture
def defaults() -> OrderDefaults:
    return OrderDefaults(
        purchase_country="SE",
        locale="en-SE",
        default_country="SE",
        product_url="https://example.com/product",
    )


@pytest.fixture
def customer() -> CustomerInfo:
    return CustomerInfo.model_validate({
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "address": "Sveavägen 46",
        "city": "Stockholm",
        "postalCode": "111 34",
    })


def test_order_request_without_customer(priced, defaults):
    request = build_order_request(priced, defaults=defaults, references=MerchantReferenceGenerator())

    assert request.purchase_country == "SE"
    assert request.locale == "en-SE"
    assert request.purchase_currency == "EUR"
    assert request.order_amount == 3425
    assert request.order_tax_amount == 685
    assert request.billing_address is None
    assert "billing_address" not in request.to_payload()
    assert request.merchant_reference1.startswith("ORDER-")
    assert request.merchant_reference2 == "DEMO-12345-12346"


def test_order_lines_copy_priced_lines(priced, defaults):
    request = build_order_request(priced, defaults=defaults, references=MerchantReferenceGenerator())

    boots, bananas = request.order_lines
    assert boots.reference == "12345"
    assert boots.name == "Boots"
    assert boots.type == "physical"
    assert boots.unit_price == 2500
    assert boots.tax_rate == 2500
    assert boots.total_amount == 2500
    assert boots.total_tax_amount == 625
    assert boots.total_discount_amount == 0
    assert boots.product_url == "https://example.com/product"
    assert bananas.quantity == 3
    assert bananas.total_amount == 240
    assert bananas.total_tax_amount == 60


def test_billing_address_from_customer(priced, defaults, customer):
    request = build_order_request(
        priced, customer, defaults=defaults, references=MerchantReferenceGenerator()
    )

    assert request.to_payload()["billing_address"] == {
        "given_name": "John",
        "family_name": "Doe",
        "email": "john.doe@example.com",
        "street_address": "Sveavägen 46",
        "postal_code": "111 34",
        "city": "Stockholm",
        "country": "SE",
    }


def test_explicit_country_is_kept(priced, defaults, customer):
    customer = customer.model_copy(update={"country": "FI"})
    request = build_order_request(
        priced, customer, defaults=defaults, references=MerchantReferenceGenerator()
    )
    assert request.billing_address.country == "FI"


def test_missing_customer_fields(customer):
    incomplete = customer.model_copy(update={"first_name": None, "postal_code": ""})

    with pytest.raises(ValidationError) as exc_info:
        validate_customer_info(incomplete)
    assert exc_info.value.message == "Missing required fields: firstName, postalCode"


@pytest.mark.parametrize("email", ["john.doe", "john@example", "john doe@example.com", "@example.com"])
def test_invalid_email(customer, email):
    with pytest.raises(ValidationError, match="Invalid email address"):
        validate_customer_info(customer.model_copy(update={"email": email}))


def test_merchant_references_are_unique_within_one_millisecond():
    generator = MerchantReferenceGenerator(clock=lambda: 1_700_000_000.0)

    refs = [generator.next() for _ in range(5)]

    assert refs == [f"ORDER-{1_700_000_000_000 + i}" for i in range(5)]


def test_merchant_references_unique_across_threads():
    generator = MerchantReferenceGenerator()
    refs: list[str] = []
    lock = threading.Lock()

    def worker():
        local = [generator.next() for _ in range(200)]
        with lock:
            refs.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(refs) == len(set(refs)) == 1600


def test_each_build_gets_a_new_reference(priced, defaults):
    references = MerchantReferenceGenerator()
    first = build_order_request(priced, defaults=defaults, references=references)
    second = build_order_request(priced, defaults=defaults, references=references)

    assert first.merchant_reference1 != second.merchant_reference1
