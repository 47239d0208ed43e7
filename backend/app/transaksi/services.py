# backend/app/transaksi/services.py

from flask import current_app
from sqlalchemy.exc import IntegrityError

from .. import db
from ..errors import ConflictError, NotFoundError
from ..models import Transaction, TransactionItem
from ..session import unit_of_work
from .totals import compute_totals, line_subtotal, to_decimal

TRANSACTION_FIELDS = (
    'transaction_id', 'date', 'school_name', 'school_address', 'treasurer_name',
    'courier_name', 'additional_notes', 'ppn_enabled', 'pph22_enabled',
    'pph23_enabled', 'service_value', 'service_type', 'school_npwp',
)
ITEM_FIELDS = ('item_code', 'item_name', 'quantity', 'unit_price', 'discount')


def _lock_transaction(id):
    """Ambil transaksi dengan row lock (diabaikan oleh SQLite)."""
    return db.session.execute(
        db.select(Transaction)
        .filter_by(id=id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()


def _items_of(transaction_id):
    return db.session.execute(
        db.select(TransactionItem)
        .filter_by(transaction_id=transaction_id)
        .order_by(TransactionItem.created_at, TransactionItem.id)
    ).scalars().all()


def _flush_or_conflict(transaction_id):
    try:
        db.session.flush()
    except IntegrityError as e:
        raise ConflictError(f"Transaksi dengan ID '{transaction_id}' sudah ada.") from e


def _ensure_unique_transaction_id(transaction_id, exclude_id=None):
    query = db.select(Transaction).filter_by(transaction_id=transaction_id)
    if exclude_id is not None:
        query = query.filter(Transaction.id != exclude_id)
    if db.session.execute(query).scalar_one_or_none():
        raise ConflictError(f"Transaksi dengan ID '{transaction_id}' sudah ada.")


def apply_totals(transaction):
    """Satu-satunya tempat kolom turunan transaksi ditulis."""
    items = _items_of(transaction.id)
    totals = compute_totals(
        items,
        ppn_enabled=transaction.ppn_enabled,
        pph22_enabled=transaction.pph22_enabled,
        pph23_enabled=transaction.pph23_enabled,
        service_value=transaction.service_value,
    )
    transaction.subtotal = totals.subtotal
    transaction.ppn_amount = totals.ppn_amount
    transaction.pph22_amount = totals.pph22_amount
    transaction.pph23_amount = totals.pph23_amount
    transaction.total_amount = totals.total_amount
    transaction.materai_required = totals.materai_required
    transaction.updated_at = db.func.current_timestamp()
    return totals


# --- Transaksi ---

def create_transaction(fields):
    with unit_of_work():
        _ensure_unique_transaction_id(fields['transaction_id'])
        transaction = Transaction(**{k: v for k, v in fields.items() if k in TRANSACTION_FIELDS})
        transaction.ppn_enabled = bool(fields.get('ppn_enabled', False))
        transaction.pph22_enabled = bool(fields.get('pph22_enabled', False))
        transaction.pph23_enabled = bool(fields.get('pph23_enabled', False))
        if transaction.service_value is not None:
            transaction.service_value = to_decimal(transaction.service_value)
        db.session.add(transaction)
        _flush_or_conflict(fields['transaction_id'])
        apply_totals(transaction)

    current_app.logger.info(f"Transaksi {transaction.transaction_id} (id={transaction.id}) dibuat.")
    return transaction


def update_transaction(id, fields):
    with unit_of_work():
        transaction = _lock_transaction(id)
        if not transaction:
            raise NotFoundError(f"Transaksi dengan id {id} tidak ditemukan.")

        new_code = fields.get('transaction_id')
        if new_code is not None and new_code != transaction.transaction_id:
            _ensure_unique_transaction_id(new_code, exclude_id=transaction.id)

        for key, value in fields.items():
            if key not in TRANSACTION_FIELDS:
                continue
            if key == 'service_value' and value is not None:
                value = to_decimal(value)
            setattr(transaction, key, value)

        _flush_or_conflict(transaction.transaction_id)
        totals = apply_totals(transaction)

    current_app.logger.info(f"Transaksi id={id} diperbarui, total baru {totals.total_amount}.")
    return transaction


def delete_transaction(id):
    """Hapus transaksi beserta semua itemnya. Tidak error kalau sudah tidak ada."""
    with unit_of_work():
        transaction = _lock_transaction(id)
        if transaction is None:
            current_app.logger.info(f"Transaksi id={id} tidak ada, tidak ada yang dihapus.")
            return True
        # cascade='all, delete-orphan' ikut menghapus item
        db.session.delete(transaction)

    current_app.logger.info(f"Transaksi id={id} beserta itemnya dihapus.")
    return True


def get_transactions():
    return db.session.execute(
        db.select(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc())
    ).scalars().all()


def get_transaction_by_id(id):
    transaction = db.session.get(Transaction, id)
    if transaction is None:
        return None
    return transaction, _items_of(transaction.id)


def get_transaction_items(transaction_id):
    return _items_of(transaction_id)


# --- Item transaksi ---

def create_transaction_item(fields):
    with unit_of_work():
        transaction = _lock_transaction(fields['transaction_id'])
        if not transaction:
            raise NotFoundError(f"Transaksi dengan id {fields['transaction_id']} tidak ditemukan.")

        discount = to_decimal(fields.get('discount'))
        item = TransactionItem(
            transaction_id=transaction.id,
            item_code=fields['item_code'],
            item_name=fields['item_name'],
            quantity=int(fields['quantity']),
            unit_price=to_decimal(fields['unit_price']),
            discount=discount,
            subtotal=line_subtotal(fields['quantity'], fields['unit_price'], discount),
        )
        db.session.add(item)
        db.session.flush()
        totals = apply_totals(transaction)

    current_app.logger.info(
        f"Item {item.item_code} ditambahkan ke transaksi id={item.transaction_id}, total baru {totals.total_amount}."
    )
    return item


def update_transaction_item(id, fields):
    with unit_of_work():
        item = db.session.get(TransactionItem, id)
        if not item:
            raise NotFoundError(f"Item transaksi dengan id {id} tidak ditemukan.")
        transaction = _lock_transaction(item.transaction_id)

        for key, value in fields.items():
            if key not in ITEM_FIELDS:
                continue
            if key in ('unit_price', 'discount'):
                value = to_decimal(value)
            elif key == 'quantity':
                value = int(value)
            setattr(item, key, value)
        item.subtotal = line_subtotal(item.quantity, item.unit_price, item.discount)

        db.session.flush()
        totals = apply_totals(transaction)

    current_app.logger.info(f"Item id={id} diperbarui, total transaksi id={item.transaction_id} kini {totals.total_amount}.")
    return item


def delete_transaction_item(id):
    with unit_of_work():
        item = db.session.get(TransactionItem, id)
        if not item:
            raise NotFoundError(f"Item transaksi dengan id {id} tidak ditemukan.")
        transaction = _lock_transaction(item.transaction_id)

        db.session.delete(item)
        db.session.flush()
        totals = apply_totals(transaction)

    current_app.logger.info(f"Item id={id} dihapus, total transaksi id={transaction.id} kini {totals.total_amount}.")
    return True
