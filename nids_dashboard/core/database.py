# nids_dashboard/core/database.py
from datetime import datetime
from flask_login import UserMixin
from .. import db

ROLE_ADMIN = 'admin'
ROLE_VIEWER = 'viewer'

# Stored in place of a bcrypt hash for accounts created through Google sign-in
OAUTH_PASSWORD_SENTINEL = 'google'

class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(32), nullable=False, default=ROLE_VIEWER)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def is_oauth_account(self):
        return self.password == OAUTH_PASSWORD_SENTINEL

    def to_dict(self):
        return {"id": self.id, "email": self.email, "role": self.role}

class ModelRecord(db.Model):
    """Evaluation metrics of one externally trained detection model."""
    __tablename__ = 'models'

    id = db.Column(db.Integer, primary_key=True)
    model_name = db.Column(db.String(255), nullable=False)
    framework = db.Column(db.String(255), nullable=False)
    accuracy = db.Column(db.Float, nullable=False)
    precision = db.Column(db.Float, nullable=False)
    recall = db.Column(db.Float, nullable=False)
    f1_score = db.Column(db.Float, nullable=False)
    date_created = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    date_updated = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "model_name": self.model_name,
            "framework": self.framework,
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1_score": self.f1_score,
            "date_created": self.date_created.isoformat() if self.date_created else None,
            "date_updated": self.date_updated.isoformat() if self.date_updated else None,
        }
