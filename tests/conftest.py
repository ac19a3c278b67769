"""
Root conftest.py - shared fixtures for all tests.

Messages are built with a fixed clock and a counting random source so
identifiers are deterministic.
"""

import os
from datetime import datetime

import pytest

from sepa_config import clear_settings_cache
from sepa_ct.domain.shared.time import ClockPort, RandomSourcePort

FIXED_NOW = datetime(2024, 1, 10, 9, 30, 45)

DEBTOR_IBAN = "NL91ABNA0417164300"
CREDITOR_IBAN = "DE89370400440532013000"


class FixedClock(ClockPort):
    def __init__(self, now: datetime = FIXED_NOW):
        self._now = now

    def now(self) -> datetime:
        return self._now


class CountingRandomSource(RandomSourcePort):
    """Returns 1, 2, 3, ... so identifier suffixes are predictable."""

    def __init__(self) -> None:
        self._value = 0

    def next_int(self) -> int:
        self._value += 1
        return self._value


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def random_source() -> CountingRandomSource:
    return CountingRandomSource()


@pytest.fixture
def config_data():
    """Batch-mode originator config as a caller would pass it."""
    return {
        "name": "Test",
        "IBAN": DEBTOR_IBAN,
        "batch": True,
        "debitor_id": "00000",
        "currency": "EUR",
        "version": "3",
    }


@pytest.fixture
def single_config_data(config_data):
    return {**config_data, "batch": False}


@pytest.fixture
def payment_data():
    return {
        "name": "Test von Testenstein",
        "IBAN": CREDITOR_IBAN,
        "amount": "1000",
        "execution_date": "2024-01-15",
        "description": "Test transaction",
        "type": "RCUR",
    }


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep SEPA_* variables from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("SEPA_"):
            monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


# Accepts any content below CstmrCdtTrfInitn; only the envelope is checked.
PERMISSIVE_XSD = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
           targetNamespace="urn:iso:std:iso:20022:tech:xsd:{name}"
           elementFormDefault="qualified">
  <xs:element name="Document">
    <xs:complexType>
      <xs:sequence>
        <xs:element name="CstmrCdtTrfInitn">
          <xs:complexType>
            <xs:sequence>
              <xs:any minOccurs="0" maxOccurs="unbounded" processContents="skip"/>
            </xs:sequence>
          </xs:complexType>
        </xs:element>
      </xs:sequence>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""


@pytest.fixture
def schema_dir(tmp_path):
    """Directory with permissive pain.001.001.02/03 schemas."""
    directory = tmp_path / "schemas"
    directory.mkdir()
    for name in ("pain.001.001.02", "pain.001.001.03"):
        (directory / f"{name}.xsd").write_text(
            PERMISSIVE_XSD.format(name=name),
            encoding="utf-8",
        )
    return directory
