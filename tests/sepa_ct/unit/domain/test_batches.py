"""Tests for Batch, BatchKey and BatchRegistry."""

import pytest

from sepa_ct.domain.payments.document import Node
from sepa_ct.domain.payments.entities import Batch, BatchKey
from sepa_ct.domain.payments.exceptions import StateError
from sepa_ct.domain.payments.services import BatchRegistry
from sepa_ct.domain.payments.value_objects import TransferType


def make_block() -> Node:
    block = Node("PmtInf")
    block.add("PmtInfId", "B-1")
    block.add("NbOfTxs")
    block.add("CtrlSum")
    return block


def make_entry(amount: str) -> Node:
    entry = Node("CdtTrfTxInf")
    entry.add("Amt").add("InstdAmt", amount)
    return entry


def batch_factory(key: BatchKey) -> Batch:
    return Batch(key, f"{key.type_code or 'NONE'}-{key.execution_date}", make_block())


class TestBatchKey:
    """Test cases for BatchKey."""

    def test_equal_keys_hash_equal(self):
        first = BatchKey(TransferType.RECURRING, "2024-01-15")
        second = BatchKey(TransferType.RECURRING, "2024-01-15")

        assert first == second
        assert hash(first) == hash(second)

    def test_type_code(self):
        assert BatchKey(TransferType.FIRST, "2024-01-15").type_code == "FRST"
        assert BatchKey(None, "2024-01-15").type_code == ""

    def test_untyped_key_differs_from_one_off(self):
        assert BatchKey(None, "2024-01-15") != BatchKey(TransferType.ONE_OFF, "2024-01-15")


class TestBatch:
    """Test cases for the Batch entity."""

    def test_add_transaction_updates_count_and_sum(self):
        batch = Batch(BatchKey(None, "2024-01-15"), "B-1", make_block())
        batch.add_transaction(make_entry("10.00"), 1000)
        batch.add_transaction(make_entry("25.00"), 2500)

        assert batch.count == 2
        assert batch.control_sum == 3500
        assert len(batch.entries) == 2
        assert len(list(batch.node.iter("CdtTrfTxInf"))) == 2

    def test_close_writes_totals_and_seals(self):
        batch = Batch(BatchKey(None, "2024-01-15"), "B-1", make_block())
        batch.add_transaction(make_entry("10.00"), 1000)
        batch.add_transaction(make_entry("25.00"), 2500)

        node = batch.close()

        assert node.find_text("NbOfTxs") == "2"
        assert node.find_text("CtrlSum") == "35.00"
        assert node.is_sealed
        assert batch.is_closed

    def test_closed_batch_rejects_transactions(self):
        batch = Batch(BatchKey(None, "2024-01-15"), "B-1", make_block())
        batch.close()

        with pytest.raises(StateError):
            batch.add_transaction(make_entry("1.00"), 100)

    def test_close_twice(self):
        batch = Batch(BatchKey(None, "2024-01-15"), "B-1", make_block())
        batch.close()

        with pytest.raises(StateError):
            batch.close()

    def test_close_requires_total_nodes(self):
        batch = Batch(BatchKey(None, "2024-01-15"), "B-1", Node("PmtInf"))

        with pytest.raises(ValueError, match="missing its NbOfTxs/CtrlSum"):
            batch.close()


class TestBatchRegistry:
    """Test cases for BatchRegistry."""

    def test_resolve_creates_once_per_key(self):
        registry = BatchRegistry()
        created = []

        def factory(key):
            created.append(key)
            return batch_factory(key)

        first = registry.resolve(TransferType.RECURRING, "2024-01-15", factory)
        second = registry.resolve(TransferType.RECURRING, "2024-01-15", factory)

        assert first is second
        assert len(created) == 1
        assert len(registry) == 1

    def test_type_and_date_both_split_batches(self):
        registry = BatchRegistry()
        registry.resolve(TransferType.RECURRING, "2024-01-15", batch_factory)
        registry.resolve(TransferType.RECURRING, "2024-01-16", batch_factory)
        registry.resolve(TransferType.FIRST, "2024-01-15", batch_factory)
        registry.resolve(None, "2024-01-15", batch_factory)

        assert len(registry) == 4

    def test_all_preserves_creation_order(self):
        registry = BatchRegistry()
        registry.resolve(TransferType.FINAL, "2024-02-01", batch_factory)
        registry.resolve(TransferType.FIRST, "2024-01-01", batch_factory)

        assert [batch.batch_id for batch in registry.all()] == [
            "FNAL-2024-02-01",
            "FRST-2024-01-01",
        ]

    def test_totals_across_batches(self):
        registry = BatchRegistry()
        first = registry.resolve(TransferType.RECURRING, "2024-01-15", batch_factory)
        second = registry.resolve(TransferType.FIRST, "2024-01-15", batch_factory)
        registry.apply_payment(first, make_entry("10.00"), 1000)
        registry.apply_payment(first, make_entry("25.00"), 2500)
        registry.apply_payment(second, make_entry("9.99"), 999)

        assert registry.total_count() == 3
        assert registry.total_control_sum() == 4499

    def test_get_and_is_empty(self):
        registry = BatchRegistry()
        assert registry.is_empty()
        assert registry.get(BatchKey(None, "2024-01-15")) is None

        batch = registry.resolve(None, "2024-01-15", batch_factory)

        assert not registry.is_empty()
        assert registry.get(BatchKey(None, "2024-01-15")) is batch
