# /backend/app/dokumen/utils.py

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

from ..errors import ValidationError

BULAN = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]
SATUAN = [
    "", "satu", "dua", "tiga", "empat", "lima", "enam",
    "tujuh", "delapan", "sembilan", "sepuluh", "sebelas",
]
SKALA = [(10 ** 12, "triliun"), (10 ** 9, "miliar"), (10 ** 6, "juta")]


def format_rupiah(amount):
    """Format angka ke mata uang Indonesia, contoh: Rp 1.234.567,00"""
    if amount is None:
        amount = 0
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"-Rp {text}" if value < 0 else f"Rp {text}"


def format_tanggal(value):
    """17 Agustus 2024"""
    if value is None:
        return ""
    if isinstance(value, str):
        value = datetime.strptime(value[:10], "%Y-%m-%d").date()
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.day} {BULAN[value.month - 1]} {value.year}"


def _eja(n):
    if n < 12:
        return SATUAN[n]
    if n < 20:
        return _eja(n - 10) + " belas"
    if n < 100:
        return _eja(n // 10) + " puluh " + _eja(n % 10)
    if n < 200:
        return "seratus " + _eja(n - 100)
    if n < 1000:
        return _eja(n // 100) + " ratus " + _eja(n % 100)
    if n < 2000:
        return "seribu " + _eja(n - 1000)
    if n < 10 ** 6:
        return _eja(n // 1000) + " ribu " + _eja(n % 1000)
    for besar, nama in SKALA:
        if n >= besar:
            return _eja(n // besar) + f" {nama} " + _eja(n % besar)
    raise ValueError(f"Angka terlalu besar untuk dieja: {n}")


def terbilang(amount):
    """Eja nominal rupiah dalam bahasa Indonesia (dibulatkan ke rupiah penuh)."""
    value = int(Decimal(str(amount or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if value == 0:
        return "nol rupiah"
    words = " ".join(_eja(abs(value)).split())
    prefix = "minus " if value < 0 else ""
    return f"{prefix}{words} rupiah"


def masa_pajak(value):
    """Masa pajak dalam format M/YYYY."""
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.month}/{value.year}"


def parse_override_date(value):
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Format override_date tidak valid. Gunakan format YYYY-MM-DD.")
