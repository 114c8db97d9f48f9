import pytest
from eth_utils import to_checksum_address

from payment_methods import InstrumentType, PaymentMethodDetails

WALLET = "0xf3a3e4d9c163251124229da6dc9c98d889647804"


def test_card_details_are_well_formed():
    details = PaymentMethodDetails(token="tok_good", billing={"postal_code": "94107"})
    assert details.instrument_type is InstrumentType.CARD
    assert details.is_well_formed
    assert details.problems() == []


def test_details_are_immutable():
    details = PaymentMethodDetails(token="tok_good", billing={"name": "Ada"})
    with pytest.raises(AttributeError):
        details.token = "tok_other"
    with pytest.raises(TypeError):
        details.billing["name"] = "Grace"


def test_billing_is_copied_on_construction():
    billing = {"name": "Ada"}
    details = PaymentMethodDetails(token="tok_good", billing=billing)
    billing["name"] = "Grace"
    assert details.billing["name"] == "Ada"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"token": ""},
        {"token": "   "},
        {"token": "tok with space"},
        {"token": None},
        {"token": "tok_good", "instrument_type": "cheque"},
        {"token": "tok_good", "billing": {"zip": 94107}},
        {"token": "tok_good", "billing": ["not", "a", "mapping"]},
        {"token": "0x1234", "instrument_type": "wallet"},
    ],
)
def test_malformed_details_report_problems(kwargs):
    details = PaymentMethodDetails(**kwargs)
    assert not details.is_well_formed
    assert details.problems()


def test_wallet_address_is_checksummed():
    details = PaymentMethodDetails(token=WALLET[2:], instrument_type="wallet")
    assert details.instrument_type is InstrumentType.WALLET
    assert details.token == to_checksum_address(WALLET)
    assert details.is_well_formed


def test_describe_masks_token():
    assert PaymentMethodDetails(token="tok_good").describe() == "card:tok_****ood"
    assert PaymentMethodDetails(token="tok_1").describe() == "card:****"


def test_as_payload():
    details = PaymentMethodDetails(token="tok_good", billing={"name": "Ada"})
    assert details.as_payload() == {
        "type": "card",
        "token": "tok_good",
        "billing": {"name": "Ada"},
    }
    assert PaymentMethodDetails(token="tok_good").as_payload() == {
        "type": "card",
        "token": "tok_good",
    }
