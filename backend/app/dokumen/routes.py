# backend/app/dokumen/routes.py

from flask import Blueprint, request, jsonify

from ..errors import ValidationError
from .renderer import generate_document
from .utils import format_rupiah, format_tanggal, terbilang, masa_pajak

dokumen_bp = Blueprint('dokumen', __name__, url_prefix='/api/dokumen')

dokumen_bp.add_app_template_filter(format_rupiah, 'rupiah')
dokumen_bp.add_app_template_filter(format_tanggal, 'tanggal')
dokumen_bp.add_app_template_filter(terbilang, 'terbilang')
dokumen_bp.add_app_template_filter(masa_pajak, 'masa_pajak')


@dokumen_bp.route('/generate', methods=['POST'])
def generate_document_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Input harus berupa objek JSON")

    transaction_id = data.get('transaction_id')
    document_type = data.get('document_type')
    if isinstance(transaction_id, bool) or not isinstance(transaction_id, int):
        raise ValidationError("Field 'transaction_id' wajib berupa bilangan bulat")
    if not document_type:
        raise ValidationError("Field 'document_type' wajib diisi")

    result = generate_document(
        transaction_id,
        document_type,
        override_date=data.get('override_date'),
        document_city=data.get('document_city'),
        courier_signer_name=data.get('courier_signer_name'),
        receiver_signer_name=data.get('receiver_signer_name'),
    )
    return jsonify(result)
