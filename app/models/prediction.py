from datetime import datetime, timezone
from decimal import Decimal

from app.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


def serialize_timestamp(value):
    # SQLite hands back naive datetimes; they were written as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class Prediction(db.Model):
    __tablename__ = 'predictions'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # --- VITAL PASIEN ---
    age = db.Column(db.Integer, nullable=False)
    blood_pressure = db.Column(db.Integer, nullable=False)     # mmHg
    specific_gravity = db.Column(db.String(16), nullable=False)  # "1.020"
    albumin = db.Column(db.Integer, nullable=False)            # 0-5
    sugar = db.Column(db.Integer, nullable=False)              # 0-5

    # --- TES DARAH ---
    # Decimals kept as text so they read back exactly as submitted
    blood_urea = db.Column(db.String(32), nullable=False)        # mg/dL
    serum_creatinine = db.Column(db.String(32), nullable=False)  # mg/dL
    hemoglobin = db.Column(db.String(32), nullable=False)        # g/dL

    # --- RIWAYAT ---
    hypertension = db.Column(db.Boolean, nullable=False)
    diabetes_mellitus = db.Column(db.Boolean, nullable=False)

    # --- HASIL ---
    prediction = db.Column(db.String(32), nullable=False)  # "Chronic Kidney Disease" / "Healthy"
    confidence = db.Column(db.String(8), nullable=False)   # "0.90"

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    @classmethod
    def from_input(cls, data, label, confidence):
        return cls(
            age=data.age,
            blood_pressure=data.blood_pressure,
            specific_gravity=str(data.specific_gravity),
            albumin=data.albumin,
            sugar=data.sugar,
            blood_urea=str(data.blood_urea),
            serum_creatinine=str(data.serum_creatinine),
            hemoglobin=str(data.hemoglobin),
            hypertension=data.hypertension,
            diabetes_mellitus=data.diabetes_mellitus,
            prediction=label,
            confidence=str(confidence),
            created_at=utcnow(),
        )

    def to_record(self):
        return PredictionRecord(
            id=self.id,
            age=self.age,
            blood_pressure=self.blood_pressure,
            specific_gravity=Decimal(self.specific_gravity),
            albumin=self.albumin,
            sugar=self.sugar,
            blood_urea=Decimal(self.blood_urea),
            serum_creatinine=Decimal(self.serum_creatinine),
            hemoglobin=Decimal(self.hemoglobin),
            hypertension=self.hypertension,
            diabetes_mellitus=self.diabetes_mellitus,
            prediction=self.prediction,
            confidence=Decimal(self.confidence),
            created_at=self.created_at,
        )

    def __repr__(self):
        return f"<Prediction ID: {self.id} - {self.prediction} ({self.confidence})>"


class PredictionRecord:
    """Read-only view of a stored prediction, shared by every store."""

    __slots__ = (
        "id", "age", "blood_pressure", "specific_gravity", "albumin", "sugar",
        "blood_urea", "serum_creatinine", "hemoglobin", "hypertension",
        "diabetes_mellitus", "prediction", "confidence", "created_at",
    )

    def __init__(self, **fields):
        for name in self.__slots__:
            object.__setattr__(self, name, fields[name])

    def __setattr__(self, name, value):
        raise AttributeError("PredictionRecord is immutable")

    def __eq__(self, other):
        if not isinstance(other, PredictionRecord):
            return NotImplemented
        return all(getattr(self, n) == getattr(other, n) for n in self.__slots__)

    def __repr__(self):
        return f"<PredictionRecord ID: {self.id} - {self.prediction} ({self.confidence})>"

    def to_dict(self):
        return {
            "id": self.id,
            "age": self.age,
            "bloodPressure": self.blood_pressure,
            "specificGravity": str(self.specific_gravity),
            "albumin": self.albumin,
            "sugar": self.sugar,
            "bloodUrea": str(self.blood_urea),
            "serumCreatinine": str(self.serum_creatinine),
            "hemoglobin": str(self.hemoglobin),
            "hypertension": self.hypertension,
            "diabetesMellitus": self.diabetes_mellitus,
            "prediction": self.prediction,
            "confidence": str(self.confidence),
            "createdAt": serialize_timestamp(self.created_at),
        }
