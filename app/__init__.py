from flask import Flask
from config import Config
from app.extensions import db, migrate, cors
from app.services.storage import build_store, PersistenceError
from app.utils.response import error

def create_app(config_class=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    migrate.init_app(app, db)

    origins = app.config.get("CORS_ORIGINS", "*")
    if origins != "*":
        origins = [o.strip() for o in origins.split(",") if o.strip()]
    cors.init_app(app, resources={r"/api/*": {"origins": origins}})

    # ==== RECORD STORE (picked once, lives as long as the app) ====
    if store is None:
        backend = app.config.get("STORAGE_BACKEND", "memory")
        store = build_store(backend)
        if backend == "database":
            with app.app_context():
                db.create_all()
    app.extensions["prediction_store"] = store
    app.logger.info("Prediction store ready: %s", type(store).__name__)

    # Register blueprints
    from app.routes.prediction_routes import prediction_bp

    app.register_blueprint(prediction_bp)

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(e):
        app.logger.error("Prediction store failure", exc_info=e)
        return error("Internal Server Error", 500)

    @app.route("/")
    def index():
        return "CKD Screening Backend is Running!"

    return app
