import logging
from flask import Flask
from sqlalchemy import text

from .config import Config
from .extensions import db, jwt, cors, migrate
from .errors import register_error_handlers, register_jwt_handlers
from .utils.api import ok


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object or Config)
    Config.init_app(app)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    migrate.init_app(app, db)

    register_error_handlers(app)
    register_jwt_handlers(jwt)

    # Register blueprints
    from .order import bp as order_bp; app.register_blueprint(order_bp)
    from .receipt import bp as receipt_bp; app.register_blueprint(receipt_bp)
    from .cart import bp as cart_bp; app.register_blueprint(cart_bp)
    from .auth import bp as auth_bp; app.register_blueprint(auth_bp)
    from .admin import bp as admin_bp; app.register_blueprint(admin_bp)

    from .cli import register_cli
    register_cli(app)

    @app.get("/")
    def health():
        return ok("API running")

    # fail fast: an unreachable database aborts startup
    with app.app_context():
        from . import model  # noqa: F401
        db.create_all()
        db.session.execute(text("SELECT 1"))
        app.logger.info("database ready (%s)", db.engine.url.get_backend_name())
        app.logger.info("blueprints: %s", ", ".join(sorted(app.blueprints)))

    return app
