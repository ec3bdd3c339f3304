import pytest

from exsdk.address import acc_address_from_bech32, get_config
from exsdk.coins import parse_dec_coins
from exsdk.errors import SdkError
from exsdk.transfer import TransferUnit, parse_transfers_str

ACC_ADDR1 = "ex1qj5c07sm6jetjz8f509qtrxgh4psxkv3ddyq7u"
ACC_ADDR2 = "ex1qwuag8gx408m9ej038vzx50ntt0x4yrq38yf06"
COINS_STR1 = "1.024okt"
COINS_STR2 = "2.048btc,2.048okt"


@pytest.fixture(autouse=True)
def _default_prefix():
    config = get_config()
    config.set_bech32_prefix_for_account("ex", "expub")
    yield
    config.set_bech32_prefix_for_account("ex", "expub")


def test_parse_transfers_str():
    addr1 = acc_address_from_bech32(ACC_ADDR1)
    addr2 = acc_address_from_bech32(ACC_ADDR2)
    coins1 = parse_dec_coins(COINS_STR1)
    coins2 = parse_dec_coins(COINS_STR2)

    units = parse_transfers_str(f"{ACC_ADDR1} {COINS_STR1}\n{ACC_ADDR2} {COINS_STR2}")
    assert len(units) == 2
    assert units[0].to == addr1
    assert units[0].coins == coins1
    assert units[1].to == addr2
    assert units[1].coins == coins2


def test_parse_transfers_str_surrounding_whitespace_is_trimmed():
    units = parse_transfers_str(f"\n  {ACC_ADDR1} {COINS_STR1}\n")
    assert units == [TransferUnit(acc_address_from_bech32(ACC_ADDR1), parse_dec_coins(COINS_STR1))]


def test_parse_transfers_str_too_many_fields():
    with pytest.raises(SdkError, match="invalid text to parse"):
        parse_transfers_str(f"{ACC_ADDR1} {COINS_STR1}\n{ACC_ADDR2} {COINS_STR2} 4.096eth")


def test_parse_transfers_str_bad_address():
    with pytest.raises(SdkError):
        parse_transfers_str(f"{ACC_ADDR1[1:]} {COINS_STR1}\n{ACC_ADDR2} {COINS_STR2}")


def test_parse_transfers_str_coins_without_denom():
    with pytest.raises(SdkError):
        parse_transfers_str(f"{ACC_ADDR1} 1.024\n{ACC_ADDR2} {COINS_STR2}")


def test_parse_transfers_str_multi_send_sample():
    text = (
        "ex1qwuag8gx408m9ej038vzx50ntt0x4yrq38yf06 1024okt,2048btc\n"
        "ex1dz6gfjsd577g000p8k9fqsn7lecw2p5sjvc08h 20.48okt"
    )
    units = parse_transfers_str(text)
    assert len(units) == 2
    assert [coin.denom for coin in units[0].coins] == ["btc", "okt"]
    assert all(unit.coins.is_all_positive() for unit in units)


def test_empty_transfer_unit_has_no_positive_coins():
    assert TransferUnit().coins.is_all_positive() is False