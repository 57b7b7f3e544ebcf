import logging
import threading

from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db
from app.models.prediction import Prediction, PredictionRecord, utcnow

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """The record store could not write or read predictions."""


class PredictionStore:
    """
    Append-only store of prediction records.

    Only two operations exist: ``create`` and ``list``. Records are never
    updated or deleted, so ids are never reused.
    """

    def create(self, data, label, confidence):
        raise NotImplementedError

    def list(self):
        raise NotImplementedError


class MemoryStorage(PredictionStore):
    """Keeps records in process memory; everything is lost on restart."""

    def __init__(self):
        self._records = []
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, data, label, confidence):
        with self._lock:
            record = PredictionRecord(
                id=self._next_id,
                age=data.age,
                blood_pressure=data.blood_pressure,
                specific_gravity=data.specific_gravity,
                albumin=data.albumin,
                sugar=data.sugar,
                blood_urea=data.blood_urea,
                serum_creatinine=data.serum_creatinine,
                hemoglobin=data.hemoglobin,
                hypertension=data.hypertension,
                diabetes_mellitus=data.diabetes_mellitus,
                prediction=label,
                confidence=confidence,
                created_at=utcnow(),
            )
            self._records.append(record)
            self._next_id += 1
        return record

    def list(self):
        with self._lock:
            snapshot = list(self._records)
        # Appended in id order, so reversing is newest first
        snapshot.reverse()
        return snapshot


class DatabaseStorage(PredictionStore):
    """Stores records in the ``predictions`` table through Flask-SQLAlchemy."""

    def __init__(self, session=None):
        self._session = session
        self._lock = threading.Lock()

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def create(self, data, label, confidence):
        with self._lock:
            row = Prediction.from_input(data, label, confidence)
            try:
                self.session.add(row)
                self.session.commit()
                # Committed rows are expired, reading them back hits the database
                return row.to_record()
            except SQLAlchemyError as exc:
                self.session.rollback()
                raise PersistenceError("Failed to save prediction") from exc

    def list(self):
        # Ids come from the database in insert order; the clock may step back
        try:
            rows = self.session.query(Prediction).order_by(Prediction.id.desc()).all()
            return [row.to_record() for row in rows]
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError("Failed to load predictions") from exc


STORAGE_BACKENDS = {
    "memory": MemoryStorage,
    "database": DatabaseStorage,
}


def build_store(backend):
    try:
        store_class = STORAGE_BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown STORAGE_BACKEND {backend!r}, expected one of {sorted(STORAGE_BACKENDS)}"
        )
    logger.info("Using %s prediction store", backend)
    return store_class()
