# backend/app/transaksi/totals.py
"""
Perhitungan total transaksi: subtotal, PPN, PPh 22, PPh 23, materai, total.

Fungsi di sini murni (tanpa akses database) supaya semua jalur mutasi
(tambah/ubah/hapus item, ubah transaksi) memakai aturan yang sama.
"""

from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP

PPN_RATE = Decimal('0.11')
PPH22_RATE = Decimal('0.015')
PPH23_RATE = Decimal('0.02')
MATERAI_THRESHOLD = Decimal('5000000')

ZERO = Decimal('0')
CENT = Decimal('0.01')

Line = namedtuple('Line', ['quantity', 'unit_price', 'discount'])

Totals = namedtuple('Totals', [
    'subtotal',
    'ppn_amount',
    'pph22_amount',
    'pph23_amount',
    'total_amount',
    'materai_required',
])


def to_decimal(value):
    """
    Konversi angka/None ke Decimal tanpa melewati float biner.

    Dibulatkan ke sen (2 desimal) sesuai kolom Numeric(15, 2), supaya nilai
    yang dihitung sama dengan nilai yang tersimpan.
    """
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_rupiah(amount):
    """Bulatkan ke rupiah penuh, setengah menjauhi nol."""
    return amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP)


def line_subtotal(quantity, unit_price, discount=None):
    """quantity * unit_price - discount, tanpa pembulatan. Boleh negatif."""
    return Decimal(int(quantity)) * to_decimal(unit_price) - to_decimal(discount)


def compute_totals(items, ppn_enabled=False, pph22_enabled=False, pph23_enabled=False, service_value=None):
    """
    Hitung ulang semua kolom turunan transaksi.

    `items` berisi objek dengan atribut quantity, unit_price dan discount
    (model TransactionItem atau Line). PPh 23 dihitung dari service_value,
    bukan dari subtotal, dan service_value selalu ditambahkan ke total.
    """
    subtotal = sum((line_subtotal(i.quantity, i.unit_price, i.discount) for i in items), ZERO)
    service = to_decimal(service_value)

    ppn_amount = round_rupiah(subtotal * PPN_RATE) if ppn_enabled else ZERO
    pph22_amount = round_rupiah(subtotal * PPH22_RATE) if pph22_enabled else ZERO
    pph23_amount = round_rupiah(service * PPH23_RATE) if pph23_enabled else ZERO

    # Total tidak dibulatkan lagi: penjumlahan komponen yang sudah dibulatkan
    total_amount = subtotal + ppn_amount - pph22_amount - pph23_amount + service

    return Totals(
        subtotal=subtotal,
        ppn_amount=ppn_amount,
        pph22_amount=pph22_amount,
        pph23_amount=pph23_amount,
        total_amount=total_amount,
        materai_required=total_amount >= MATERAI_THRESHOLD,
    )
