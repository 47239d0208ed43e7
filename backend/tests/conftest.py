"""Fixture pytest: aplikasi Flask dengan SQLite di memori."""

from datetime import date

import pytest

from app import create_app, db
from app.transaksi import services
from config import TestConfig


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def transaction_fields():
    def _build(**overrides):
        fields = {
            "transaction_id": "TRX-001",
            "date": date(2024, 8, 17),
            "school_name": "SD Negeri 1 Bandung",
            "school_address": "Jl. Merdeka No. 1, Bandung",
            "treasurer_name": "Siti Aminah",
            "courier_name": "Budi",
            "additional_notes": None,
            "ppn_enabled": False,
            "pph22_enabled": False,
            "pph23_enabled": False,
            "service_value": None,
            "service_type": None,
            "school_npwp": None,
        }
        fields.update(overrides)
        return fields

    return _build


@pytest.fixture
def make_transaction(app, transaction_fields):
    def _make(**overrides):
        return services.create_transaction(transaction_fields(**overrides))

    return _make


@pytest.fixture
def add_item(app):
    def _add(transaction, quantity=1, unit_price=0, discount=0, item_code="BRG-01", item_name="Buku Tulis"):
        return services.create_transaction_item({
            "transaction_id": transaction.id,
            "item_code": item_code,
            "item_name": item_name,
            "quantity": quantity,
            "unit_price": unit_price,
            "discount": discount,
        })

    return _add
