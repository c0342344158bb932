import os
from decimal import Decimal


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "sqlite:///modaflex.db"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # sem migrations: cria as tabelas na inicialização
    AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "1") == "1"

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "jwt-super-secret")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # R$ 20 por dia de atraso
    FINE_DAILY_RATE = Decimal(os.getenv("FINE_DAILY_RATE", "20.00"))

    SCHEDULER_ENABLED = os.getenv("SCHEDULER_ENABLED", "1") == "1"
    LATE_CHECK_INTERVAL_MINUTES = int(os.getenv("LATE_CHECK_INTERVAL_MINUTES", "10"))

    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USE_TLS = True
    MAIL_USERNAME = os.getenv("MAIL_USERNAME", "")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", "")
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", "noreply@modaflex.local")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTO_CREATE_TABLES = True
    SCHEDULER_ENABLED = False
    MAIL_SUPPRESS_SEND = True
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    LOG_LEVEL = "DEBUG"
