import os
from datetime import timedelta

DEFAULT_ADMIN_PASSWORD = "equine-admin"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000,"
    "http://127.0.0.1:5500,"
    "https://equine-4ya0.onrender.com"
)


def _csv(value):
    return [x.strip() for x in (value or "").split(",") if x.strip()]


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-secret-change-me")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD
    ADMIN_TOKEN_EXPIRES = timedelta(hours=int(os.getenv("ADMIN_TOKEN_EXPIRES", "12")))

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER")  # resolved against instance path when unset
    RECEIPT_EXTENSIONS = _csv(os.getenv("RECEIPT_EXTENSIONS", ".jpg,.jpeg,.png,.gif,.webp,.heic,.pdf"))

    CART_TTL_SECONDS = int(os.getenv("CART_TTL_SECONDS", "86400"))
    ORDER_DEFAULT_STATUS = os.getenv("ORDER_DEFAULT_STATUS", "Awaiting Payment")
    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))

    @staticmethod
    def init_app(app):
        if not app.config.get("SQLALCHEMY_DATABASE_URI"):
            if os.getenv("DATABASE_URL"):
                app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL")
            else:
                os.makedirs(app.instance_path, exist_ok=True)
                app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{os.path.join(app.instance_path, 'equine.db')}"

        if not app.config.get("UPLOAD_FOLDER"):
            app.config["UPLOAD_FOLDER"] = os.path.join(app.instance_path, "uploads")
        os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    ADMIN_PASSWORD = DEFAULT_ADMIN_PASSWORD
    LOG_LEVEL = "WARNING"
