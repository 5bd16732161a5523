from flask import Flask

from .app_logger import setup_logging
from .config import Config
from .controllers.demo import bp as demo_bp


def create_app(config_object=Config):
    # No static folder and no routes: the app only carries config and the CLI
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)
    setup_logging(app.config["LOG_LEVEL"])
    app.register_blueprint(demo_bp)

    return app
