from datetime import datetime
from modaflex.extensions import db

USER_ROLES = ("admin", "attendant")


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="attendant")

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
