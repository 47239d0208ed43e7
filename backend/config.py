# backend/config.py
import os
from dotenv import load_dotenv

# Tentukan path absolut dari direktori root proyek
basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, '.env'))

class Config:
    """Set Flask configuration from environment variables."""

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///' + os.path.join(basedir, 'ledger.db'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server
    DEBUG = os.environ.get('DEBUG', 'false').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:3000')

    # Dokumen
    DEFAULT_DOCUMENT_CITY = os.environ.get('DEFAULT_DOCUMENT_CITY', 'Jakarta')


class TestConfig(Config):
    """Konfigurasi untuk pytest: database SQLite di memori."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
