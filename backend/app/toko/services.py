# backend/app/toko/services.py

from flask import current_app

from .. import db
from ..errors import NotFoundError
from ..models import StoreProfile
from ..session import unit_of_work


def create_store_profile(fields):
    with unit_of_work():
        profile = StoreProfile(**fields)
        db.session.add(profile)
    current_app.logger.info(f"Profil toko '{profile.name}' (id={profile.id}) dibuat.")
    return profile


def get_store_profile():
    """Profil pertama yang ditemukan, atau None. Aplikasi ini diasumsikan satu toko."""
    return db.session.execute(db.select(StoreProfile).order_by(StoreProfile.id).limit(1)).scalar_one_or_none()


def update_store_profile(id, fields):
    with unit_of_work():
        profile = db.session.get(StoreProfile, id)
        if not profile:
            raise NotFoundError(f"Profil toko dengan id {id} tidak ditemukan.")

        for key, value in fields.items():
            setattr(profile, key, value)
        profile.updated_at = db.func.current_timestamp()
    current_app.logger.info(f"Profil toko id={id} diperbarui.")
    return profile
