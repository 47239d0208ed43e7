# backend/app/laporan/routes.py

import io
import pandas as pd
from datetime import datetime
from flask import Blueprint, jsonify, send_file, current_app
from ..transaksi.services import get_transactions

laporan_bp = Blueprint('laporan', __name__, url_prefix='/api/laporan')

REPORT_COLUMNS = [
    'transaction_id', 'date', 'school_name', 'subtotal', 'ppn_amount',
    'pph22_amount', 'pph23_amount', 'service_value', 'total_amount', 'materai_required',
]


def build_report_rows():
    """Baris laporan transaksi, terbaru lebih dulu."""
    rows = []
    for r in get_transactions():
        data = r.to_dict()
        rows.append({"id": r.id, **{key: data[key] for key in REPORT_COLUMNS}})
    return rows


@laporan_bp.route('/transaksi', methods=['GET'])
def get_laporan():
    return jsonify(build_report_rows())


@laporan_bp.route('/export/transaksi', methods=['GET'])
def export_laporan():
    rows = build_report_rows()
    if not rows:
        return jsonify(error="Tidak ada data untuk diekspor"), 404

    df = pd.DataFrame(rows, columns=['id'] + REPORT_COLUMNS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='xlsxwriter') as writer:
        df.to_excel(writer, index=False, sheet_name='Laporan')
    output.seek(0)
    current_app.logger.info(f"Laporan transaksi diekspor ({len(rows)} baris).")

    return send_file(
        output,
        as_attachment=True,
        download_name=f'laporan_transaksi_{datetime.now().strftime("%Y%m%d")}.xlsx',
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
