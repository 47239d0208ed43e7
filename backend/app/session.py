# backend/app/session.py

from contextlib import contextmanager

from . import db


@contextmanager
def unit_of_work():
    """Commit sekali di akhir; kalau ada error apa pun, rollback lalu lempar lagi."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
