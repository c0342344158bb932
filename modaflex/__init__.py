import logging

from flask import Flask, jsonify

from modaflex.config import Config
from modaflex.extensions import db, migrate, jwt, mail


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # 1) db antes de tudo (db.session / create_all dependem dele)
    db.init_app(app)

    # 2) demais extensões
    migrate.init_app(app, db)
    jwt.init_app(app)
    mail.init_app(app)

    # 3) models registrados no metadata
    from modaflex import models  # noqa: F401

    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()

    # 4) blueprints da API
    from modaflex.controllers.auth_controller import auth_bp
    from modaflex.controllers.clothing_controller import clothing_bp
    from modaflex.controllers.customer_controller import customer_bp
    from modaflex.controllers.rental_controller import rental_bp
    from modaflex.controllers.stock_controller import stock_bp
    from modaflex.controllers.calendar_controller import calendar_bp
    from modaflex.controllers.report_controller import report_bp
    from modaflex.controllers.notification_controller import notif_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(clothing_bp, url_prefix="/clothes")
    app.register_blueprint(customer_bp, url_prefix="/customers")
    app.register_blueprint(rental_bp, url_prefix="/rentals")
    app.register_blueprint(stock_bp, url_prefix="/stock-movements")
    app.register_blueprint(calendar_bp, url_prefix="/calendar")
    app.register_blueprint(report_bp, url_prefix="/reports")
    app.register_blueprint(notif_bp, url_prefix="/notifications")

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    # scheduler (lembretes de atraso)
    from modaflex.tasks.scheduler import start_scheduler
    start_scheduler(app)

    return app
