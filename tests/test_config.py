import pytest

from exsdk.coins import parse_dec_coins
from exsdk.config import (
    Attribute,
    BaseClient,
    BroadcastMode,
    MessageLog,
    Module,
    StringEvent,
    TxResponse,
    new_client_config,
    parse_chain_id,
)
from exsdk.errors import SdkError


def _source_config(**overrides):
    args = dict(
        node_uri="testURL",
        chain_id="testchain-1",
        broadcast_mode=BroadcastMode.BLOCK,
        fees="",
        gas=200000,
        gas_adjustment=1.1,
        gas_prices="0.00000001okt",
    )
    args.update(overrides)
    return new_client_config(**args)


def test_new_client_config_from_source_values():
    config = _source_config()
    assert config.node_uri == "testURL"
    assert config.chain_id == "testchain-1"
    assert config.chain_id_int == 1
    assert config.gas == 200000
    assert config.broadcast_mode is BroadcastMode.BLOCK
    assert len(config.fees) == 0
    assert config.gas_prices == parse_dec_coins("0.00000001okt")


def test_gas_adjustment_must_exceed_one_with_gas_prices():
    with pytest.raises(SdkError, match="gasAdjustment must be greater than 1"):
        _source_config(gas_adjustment=1)


def test_gas_adjustment_free_without_gas_prices():
    config = _source_config(gas_adjustment=1, gas_prices="", fees="1.024okt")
    assert config.fees == parse_dec_coins("1.024okt")
    assert len(config.gas_prices) == 0


@pytest.mark.parametrize(
    "overrides",
    [{"fees": "1.024"}, {"gas_prices": "abc"}, {"chain_id": "testchain"}],
)
def test_new_client_config_rejects_bad_settings(overrides):
    with pytest.raises(SdkError):
        _source_config(**overrides)


def test_parse_chain_id():
    assert parse_chain_id("exchain-66") == 66
    assert parse_chain_id("  testchain-1  ") == 1


@pytest.mark.parametrize(
    "chain_id", ["testchain", "-1", "chain-0", "Test-1", "chain_1", "a" * 47 + "-1"]
)
def test_parse_chain_id_rejects(chain_id):
    with pytest.raises(SdkError):
        parse_chain_id(chain_id)


def test_broadcast_mode_values():
    assert BroadcastMode("block") is BroadcastMode.BLOCK
    assert {mode.value for mode in BroadcastMode} == {"sync", "async", "block"}


def test_tx_response_defaults_are_independent():
    first, second = TxResponse(), TxResponse()
    first.logs.append(MessageLog(events=[StringEvent("message", [Attribute("k", "v")])]))
    assert second.logs == []
    assert first.code == 0
    assert first.logs[0].events[0].attributes[0].value == "v"


class _FakeClient(BaseClient):
    def __init__(self, config):
        self._config = config
        self.broadcasts = []

    @property
    def config(self):
        return self._config

    def query(self, path, key=None):
        return path.encode(), 7

    def query_store(self, key, store_name, end_path):
        return key, 8

    def broadcast(self, tx_bytes, broadcast_mode):
        self.broadcasts.append((tx_bytes, broadcast_mode))
        return TxResponse(txhash="hash")

    def build_and_broadcast(self, from_name, passphrase, memo, msgs, acc_number, seq_number):
        return TxResponse(height=acc_number + seq_number)


def test_base_client_is_abstract():
    with pytest.raises(TypeError):
        BaseClient()


def test_base_client_subclass_works():
    client = _FakeClient(_source_config())
    assert client.config.chain_id == "testchain-1"
    assert client.query("custom/token/info/okt") == (b"custom/token/info/okt", 7)
    assert client.broadcast(b"tx", BroadcastMode.SYNC).txhash == "hash"
    assert client.build_and_broadcast("alice", "pw", "", [], 1, 2).height == 3


def test_module_is_abstract():
    with pytest.raises(TypeError):
        Module()

    class Named(Module):
        def name(self):
            return "token"

    assert Named().name() == "token"