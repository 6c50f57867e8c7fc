"""Integration tests for the diamond lifecycle over a file-backed store."""

import json

import pytest

from diamond_ledger.assets.record import DiamondRecord
from diamond_ledger.chaincode import DiamondChaincode
from diamond_ledger.state import FileStateStore, create_state_store
from diamond_ledger.utils.config import get_settings
from diamond_ledger.utils.types import ErrorKind


@pytest.fixture
def file_chaincode(tmp_path) -> DiamondChaincode:
    """Return a contract over a fresh file store."""
    return DiamondChaincode(FileStateStore(tmp_path / "ledger"))


class TestDiamondLifecycle:
    """Test the complete create, query and transfer lifecycle."""

    def test_sample_scenario(self, file_chaincode):
        """Test create, query, transfer and query again."""
        assert file_chaincode.init().success

        created = file_chaincode.invoke("createAsset", ["asdf", "Blue", "35", "Bob"])
        assert created.success

        first = DiamondRecord.from_bytes(file_chaincode.invoke("queryAsset", ["asdf"]).payload)
        assert first == DiamondRecord(
            docType="diamond", name="asdf", origin="blue", carats=35, owner="bob"
        )

        transferred = file_chaincode.invoke("transferAsset", ["asdf", "Alice"])
        assert transferred.success

        second = DiamondRecord.from_bytes(file_chaincode.invoke("queryAsset", ["asdf"]).payload)
        assert second == first.with_owner("alice")

    def test_state_survives_restart(self, tmp_path):
        """Test a new contract over the same directory sees earlier diamonds."""
        DiamondChaincode(FileStateStore(tmp_path / "ledger")).invoke(
            "createAsset", ["hope", "India", "45", "Smithsonian"]
        )

        restarted = DiamondChaincode(FileStateStore(tmp_path / "ledger"))
        response = restarted.invoke("queryAsset", ["hope"])

        assert json.loads(response.payload)["owner"] == "smithsonian"

    def test_repeated_transfers_touch_one_key(self, file_chaincode):
        """Test transfers mutate the same key and never add new ones."""
        file_chaincode.invoke("createAsset", ["asdf", "Blue", "35", "Bob"])
        store = file_chaincode.operations.store

        for owner in ("Alice", "Carol", "Dave", "Carol"):
            assert file_chaincode.invoke("transferAsset", ["asdf", owner]).success

        assert store.keys() == ["asdf"]
        assert json.loads(store.get("asdf"))["owner"] == "carol"

    def test_transfer_to_same_owner_is_byte_identical(self, file_chaincode):
        """Test re-transferring to the current owner changes nothing."""
        file_chaincode.invoke("createAsset", ["asdf", "Blue", "35", "Bob"])
        before = file_chaincode.invoke("queryAsset", ["asdf"]).payload

        file_chaincode.invoke("transferAsset", ["asdf", "bob"])

        assert file_chaincode.invoke("queryAsset", ["asdf"]).payload == before

    def test_failures_leave_store_unchanged(self, file_chaincode):
        """Test failed invocations never write."""
        store = file_chaincode.operations.store
        file_chaincode.invoke("createAsset", ["asdf", "Blue", "35", "Bob"])
        before = {key: store.get(key) for key in store.keys()}

        outcomes = [
            file_chaincode.invoke("createAsset", ["asdf", "Red", "2", "Eve"]),
            file_chaincode.invoke("createAsset", ["x", "", "5", "bob"]),
            file_chaincode.invoke("createAsset", ["x", "blue", "five", "bob"]),
            file_chaincode.invoke("transferAsset", ["ghost", "eve"]),
            file_chaincode.invoke("queryAsset", ["ghost"]),
            file_chaincode.invoke("mintAsset", ["y"]),
        ]

        assert [o.error_kind for o in outcomes] == [
            ErrorKind.ALREADY_EXISTS,
            ErrorKind.INVALID_ARGUMENTS,
            ErrorKind.INVALID_ARGUMENTS,
            ErrorKind.NOT_FOUND,
            ErrorKind.NOT_FOUND,
            ErrorKind.UNKNOWN_OPERATION,
        ]
        assert {key: store.get(key) for key in store.keys()} == before

    def test_configured_store(self):
        """Test a contract built from the configured store."""
        store = create_state_store(get_settings().state)
        chaincode = DiamondChaincode(store)

        chaincode.invoke("createAsset", ["cullinan", "South Africa", "3106", "Crown"])

        assert isinstance(store, FileStateStore)
        assert store.directory == get_settings().state.directory
        assert json.loads(store.get("cullinan"))["origin"] == "south africa"
