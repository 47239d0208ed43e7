# backend/app/errors.py

from flask import jsonify


class LedgerError(Exception):
    """Kesalahan domain yang dikembalikan ke klien sebagai {"error": ...}."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    """Input tidak lengkap atau formatnya salah."""
    status_code = 400


class NotFoundError(LedgerError):
    status_code = 404


class ConflictError(LedgerError):
    """transaction_id sudah dipakai."""
    status_code = 409


class UnsupportedTypeError(LedgerError):
    status_code = 400


def register_error_handlers(app):
    @app.errorhandler(LedgerError)
    def handle_ledger_error(e):
        app.logger.warning(f"{type(e).__name__}: {e.message}")
        return jsonify(error=e.message), e.status_code

    @app.errorhandler(500)
    def handle_internal_error(e):
        original = getattr(e, 'original_exception', None) or e
        app.logger.error(f"Kesalahan internal server: {original}", exc_info=original)
        return jsonify(error=f"Kesalahan internal server: {original}"), 500
