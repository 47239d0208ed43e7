# backend/app/models.py
from . import db
from decimal import Decimal


def _money(value):
    return float(value) if value is not None else None


class StoreProfile(db.Model):
    __tablename__ = 'store_profiles'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    address = db.Column(db.Text, nullable=False)
    phone = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    npwp = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, nullable=False, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
            "npwp": self.npwp,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class Transaction(db.Model):
    __tablename__ = 'transactions'
    id = db.Column(db.Integer, primary_key=True)
    transaction_id = db.Column(db.String(100), unique=True, nullable=False)
    date = db.Column(db.Date, nullable=False)
    school_name = db.Column(db.String(255), nullable=False)
    school_address = db.Column(db.Text, nullable=False)
    treasurer_name = db.Column(db.String(255), nullable=False)
    courier_name = db.Column(db.String(255), nullable=False)
    additional_notes = db.Column(db.Text, nullable=True)

    ppn_enabled = db.Column(db.Boolean, nullable=False, default=False)
    pph22_enabled = db.Column(db.Boolean, nullable=False, default=False)
    pph23_enabled = db.Column(db.Boolean, nullable=False, default=False)
    service_value = db.Column(db.Numeric(15, 2), nullable=True)
    service_type = db.Column(db.String(255), nullable=True)
    school_npwp = db.Column(db.String(50), nullable=True)

    # Kolom turunan, hanya ditulis oleh services.apply_totals()
    subtotal = db.Column(db.Numeric(15, 2), nullable=False, default=Decimal('0'))
    ppn_amount = db.Column(db.Numeric(15, 2), nullable=False, default=Decimal('0'))
    pph22_amount = db.Column(db.Numeric(15, 2), nullable=False, default=Decimal('0'))
    pph23_amount = db.Column(db.Numeric(15, 2), nullable=False, default=Decimal('0'))
    total_amount = db.Column(db.Numeric(15, 2), nullable=False, default=Decimal('0'))
    materai_required = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, nullable=False, default=db.func.current_timestamp())

    items = db.relationship(
        'TransactionItem',
        backref='transaction',
        cascade='all, delete-orphan',
        order_by='TransactionItem.id',
        lazy=True,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "transaction_id": self.transaction_id,
            "date": self.date.strftime('%Y-%m-%d'),
            "school_name": self.school_name,
            "school_address": self.school_address,
            "treasurer_name": self.treasurer_name,
            "courier_name": self.courier_name,
            "additional_notes": self.additional_notes,
            "subtotal": _money(self.subtotal),
            "ppn_enabled": self.ppn_enabled,
            "ppn_amount": _money(self.ppn_amount),
            "pph22_enabled": self.pph22_enabled,
            "pph22_amount": _money(self.pph22_amount),
            "pph23_enabled": self.pph23_enabled,
            "pph23_amount": _money(self.pph23_amount),
            "service_value": _money(self.service_value),
            "service_type": self.service_type,
            "school_npwp": self.school_npwp,
            "materai_required": self.materai_required,
            "total_amount": _money(self.total_amount),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class TransactionItem(db.Model):
    __tablename__ = 'transaction_items'
    id = db.Column(db.Integer, primary_key=True)
    transaction_id = db.Column(db.Integer, db.ForeignKey('transactions.id', ondelete='CASCADE'), nullable=False, index=True)
    item_code = db.Column(db.String(100), nullable=False)
    item_name = db.Column(db.String(255), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    unit_price = db.Column(db.Numeric(15, 2), nullable=False)
    discount = db.Column(db.Numeric(15, 2), nullable=False, default=Decimal('0'))
    subtotal = db.Column(db.Numeric(15, 2), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            "id": self.id,
            "transaction_id": self.transaction_id,
            "item_code": self.item_code,
            "item_name": self.item_name,
            "quantity": self.quantity,
            "unit_price": _money(self.unit_price),
            "discount": _money(self.discount),
            "subtotal": _money(self.subtotal),
            "created_at": self.created_at.isoformat(),
        }
