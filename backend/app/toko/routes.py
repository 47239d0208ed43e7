# backend/app/toko/routes.py

from flask import Blueprint, request, jsonify

from .services import create_store_profile, get_store_profile, update_store_profile
from .utils import parse_profile_payload

toko_bp = Blueprint('toko', __name__, url_prefix='/api/toko')


@toko_bp.route('', methods=['GET'])
def get_profile_route():
    profile = get_store_profile()
    return jsonify(profile.to_dict() if profile else None)


@toko_bp.route('', methods=['POST'])
def create_profile_route():
    fields = parse_profile_payload(request.get_json(silent=True))
    profile = create_store_profile(fields)
    return jsonify(profile.to_dict()), 201


@toko_bp.route('/<int:id>', methods=['PATCH', 'PUT'])
def update_profile_route(id):
    fields = parse_profile_payload(request.get_json(silent=True), partial=True)
    profile = update_store_profile(id, fields)
    return jsonify(profile.to_dict())
