# backend/app/toko/utils.py

import re

from ..errors import ValidationError

PROFILE_FIELDS = ('name', 'address', 'phone', 'email', 'npwp')
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_email(email):
    return bool(EMAIL_PATTERN.match(email or ""))


def parse_profile_payload(data, partial=False):
    """Validasi body JSON profil toko. Semua field wajib dan tidak boleh kosong."""
    if not isinstance(data, dict):
        raise ValidationError("Input harus berupa objek JSON")

    fields = {}
    for key in PROFILE_FIELDS:
        if partial and key not in data:
            continue
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Field '{key}' wajib diisi")
        fields[key] = value.strip()

    if 'email' in fields and not is_valid_email(fields['email']):
        raise ValidationError("Format email tidak valid")
    return fields
