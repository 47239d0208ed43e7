import logging
from datetime import datetime, timezone
from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from config import Config
from flask_migrate import Migrate

# 1. Inisialisasi ekstensi di scope global
db = SQLAlchemy()
migrate = Migrate()

def create_app(config_class=Config):
    """Factory function untuk membuat instance aplikasi Flask."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # 2. Inisialisasi ekstensi dengan aplikasi
    db.init_app(app)
    migrate.init_app(app, db)

    CORS(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS')}})

    # Setup Logging
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'), format='%(asctime)s - [%(levelname)s] - %(message)s')

    # 3. Kelompokkan semua registrasi blueprint di satu tempat
    with app.app_context():
        from . import models  # noqa: F401  (daftarkan tabel ke metadata)
        from .errors import register_error_handlers
        from .toko.routes import toko_bp
        from .transaksi.routes import transaksi_bp
        from .dokumen.routes import dokumen_bp
        from .laporan.routes import laporan_bp

        register_error_handlers(app)
        app.register_blueprint(toko_bp)
        app.register_blueprint(transaksi_bp)
        app.register_blueprint(dokumen_bp)
        app.register_blueprint(laporan_bp)

        app.logger.info("Semua blueprints telah diregistrasi.")

    @app.route('/api/health')
    def healthcheck():
        return jsonify(status='ok', timestamp=datetime.now(timezone.utc).isoformat())

    # Skema database dikelola oleh Flask-Migrate ('flask db upgrade').

    return app
