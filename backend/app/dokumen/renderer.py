# backend/app/dokumen/renderer.py

from datetime import timedelta
from flask import current_app, render_template

from ..errors import NotFoundError, UnsupportedTypeError
from ..toko.services import get_store_profile
from ..transaksi.services import get_transaction_by_id
from .utils import parse_override_date

# Jenis dokumen -> template Jinja2
TEMPLATES = {
    'sales-note': 'dokumen/nota_penjualan.html',
    'receipt': 'dokumen/kwitansi.html',
    'invoice': 'dokumen/invoice.html',
    'handover-report': 'dokumen/bast.html',
    'purchase-order': 'dokumen/surat_pesanan.html',
    'tax-invoice': 'dokumen/faktur_pajak.html',
    'proforma-invoice': 'dokumen/proforma_invoice.html',
}
PROFORMA_VALID_DAYS = 30


def generate_document(transaction_id, document_type, override_date=None, document_city=None,
                      courier_signer_name=None, receiver_signer_name=None):
    """Render satu dokumen HTML dari data transaksi yang sudah final. Hanya membaca."""
    template = TEMPLATES.get(document_type)
    if template is None:
        raise UnsupportedTypeError(f"Jenis dokumen tidak didukung: {document_type}")

    result = get_transaction_by_id(transaction_id)
    if result is None:
        raise NotFoundError(f"Transaksi dengan id {transaction_id} tidak ditemukan.")
    transaction, items = result
    store = get_store_profile()

    document_date = parse_override_date(override_date) or transaction.date
    item_rows = [i.to_dict() for i in items]

    html_content = render_template(
        template,
        transaction=transaction.to_dict(),
        items=item_rows,
        store=store.to_dict() if store else None,
        document_date=document_date,
        valid_until=document_date + timedelta(days=PROFORMA_VALID_DAYS),
        total_discount=sum(i.discount for i in items),
        city=document_city or current_app.config.get('DEFAULT_DOCUMENT_CITY', 'Jakarta'),
        courier_signer_name=courier_signer_name,
        receiver_signer_name=receiver_signer_name,
    )
    current_app.logger.info(f"Dokumen {document_type} untuk transaksi id={transaction_id} dibuat.")

    return {
        "html_content": html_content,
        "document_type": document_type,
        "transaction_id": transaction_id,
    }
