# backend/app/transaksi/routes.py

from flask import Blueprint, request, jsonify

from . import services
from .utils import parse_transaction_payload, parse_item_payload

transaksi_bp = Blueprint('transaksi', __name__, url_prefix='/api/transaksi')


@transaksi_bp.route('', methods=['GET'])
def list_transactions_route():
    return jsonify([t.to_dict() for t in services.get_transactions()])


@transaksi_bp.route('', methods=['POST'])
def create_transaction_route():
    fields = parse_transaction_payload(request.get_json(silent=True))
    transaction = services.create_transaction(fields)
    return jsonify(transaction.to_dict()), 201


@transaksi_bp.route('/<int:id>', methods=['GET'])
def get_transaction_route(id):
    result = services.get_transaction_by_id(id)
    if result is None:
        return jsonify(None)
    transaction, items = result
    return jsonify(transaction=transaction.to_dict(), items=[i.to_dict() for i in items])


@transaksi_bp.route('/<int:id>', methods=['PATCH', 'PUT'])
def update_transaction_route(id):
    fields = parse_transaction_payload(request.get_json(silent=True), partial=True)
    transaction = services.update_transaction(id, fields)
    return jsonify(transaction.to_dict())


@transaksi_bp.route('/<int:id>', methods=['DELETE'])
def delete_transaction_route(id):
    services.delete_transaction(id)
    return jsonify(success=True)


@transaksi_bp.route('/<int:id>/items', methods=['GET'])
def list_items_route(id):
    return jsonify([i.to_dict() for i in services.get_transaction_items(id)])


@transaksi_bp.route('/items', methods=['POST'])
def create_item_route():
    fields = parse_item_payload(request.get_json(silent=True))
    item = services.create_transaction_item(fields)
    return jsonify(item.to_dict()), 201


@transaksi_bp.route('/items/<int:id>', methods=['PATCH', 'PUT'])
def update_item_route(id):
    fields = parse_item_payload(request.get_json(silent=True), partial=True)
    item = services.update_transaction_item(id, fields)
    return jsonify(item.to_dict())


@transaksi_bp.route('/items/<int:id>', methods=['DELETE'])
def delete_item_route(id):
    services.delete_transaction_item(id)
    return jsonify(success=True)
