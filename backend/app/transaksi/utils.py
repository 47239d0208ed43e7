# backend/app/transaksi/utils.py

from datetime import datetime, date
from decimal import Decimal, InvalidOperation

from ..errors import ValidationError

REQUIRED_TRANSACTION_FIELDS = (
    'transaction_id', 'date', 'school_name', 'school_address', 'treasurer_name', 'courier_name',
)
OPTIONAL_TEXT_FIELDS = ('additional_notes', 'service_type', 'school_npwp')
TAX_FLAGS = ('ppn_enabled', 'pph22_enabled', 'pph23_enabled')
REQUIRED_ITEM_FIELDS = ('item_code', 'item_name', 'quantity', 'unit_price')


def require_json_object(data):
    if not isinstance(data, dict):
        raise ValidationError("Input harus berupa objek JSON")
    return data


def parse_date(value, field='date'):
    """Terima 'YYYY-MM-DD' (atau ISO datetime) dan kembalikan objek date."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Field '{field}' wajib diisi dengan format YYYY-MM-DD")
    try:
        return datetime.strptime(value.strip()[:10], '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError(f"Format tanggal '{field}' tidak valid. Gunakan format YYYY-MM-DD.")


def parse_amount(value, field, allow_none=False):
    """Angka non-negatif sebagai Decimal."""
    if value is None:
        if allow_none:
            return None
        raise ValidationError(f"Field '{field}' wajib diisi")
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field}' harus berupa angka")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Field '{field}' harus berupa angka")
    if not amount.is_finite():
        raise ValidationError(f"Field '{field}' harus berupa angka")
    if amount < 0:
        raise ValidationError(f"Field '{field}' tidak boleh negatif")
    if amount.as_tuple().exponent < -2:
        raise ValidationError(f"Field '{field}' maksimal 2 angka di belakang koma")
    return amount


def parse_quantity(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Field 'quantity' harus berupa bilangan bulat")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError("Field 'quantity' harus berupa bilangan bulat")
    if value <= 0:
        raise ValidationError("Field 'quantity' harus lebih dari 0")
    return int(value)


def _text(value, field, required):
    if value is None:
        if required:
            raise ValidationError(f"Field '{field}' wajib diisi")
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{field}' harus berupa teks")
    value = value.strip()
    if required and not value:
        raise ValidationError(f"Field '{field}' wajib diisi")
    return value


def _flag(value, field):
    if not isinstance(value, bool):
        raise ValidationError(f"Field '{field}' harus berupa boolean")
    return value


def parse_transaction_payload(data, partial=False):
    """Ubah body JSON menjadi dict field transaksi yang sudah divalidasi."""
    require_json_object(data)
    fields = {}

    for key in REQUIRED_TRANSACTION_FIELDS:
        if partial and key not in data:
            continue
        if key == 'date':
            fields['date'] = parse_date(data.get('date'))
        else:
            fields[key] = _text(data.get(key), key, required=True)

    for key in OPTIONAL_TEXT_FIELDS:
        if key in data or not partial:
            fields[key] = _text(data.get(key), key, required=False) or None

    for key in TAX_FLAGS:
        if key in data:
            fields[key] = _flag(data[key], key)
        elif not partial:
            fields[key] = False

    if 'service_value' in data or not partial:
        fields['service_value'] = parse_amount(data.get('service_value'), 'service_value', allow_none=True)

    return fields


def parse_item_payload(data, partial=False):
    require_json_object(data)
    fields = {}

    if not partial:
        transaction_id = data.get('transaction_id')
        if isinstance(transaction_id, bool) or not isinstance(transaction_id, int):
            raise ValidationError("Field 'transaction_id' wajib berupa bilangan bulat")
        fields['transaction_id'] = transaction_id

    for key in ('item_code', 'item_name'):
        if key in data or not partial:
            fields[key] = _text(data.get(key), key, required=True)

    if 'quantity' in data or not partial:
        fields['quantity'] = parse_quantity(data.get('quantity'))
    if 'unit_price' in data or not partial:
        fields['unit_price'] = parse_amount(data.get('unit_price'), 'unit_price')
    if 'discount' in data:
        fields['discount'] = parse_amount(data.get('discount'), 'discount')
    elif not partial:
        fields['discount'] = Decimal('0')

    return fields
