"""
Parameter Dashboard
Flask application assembled from components
"""
import logging

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .components import EXTENSION_KEY, create_services
from .components.file_upload import init_file_upload
from .components.parameter_inputs import init_parameter_inputs
from .components.system_logs import init_system_logs
from .config.settings import DashboardConfig
from .core import attach_log_buffer, register_error_handlers, system_logs
from .routes.main_routes import main_bp

logger = logging.getLogger(__name__)


class DashboardApp:
    """Main dashboard application class"""

    def __init__(self):
        self.app = None
        self.limiter = None

    def create_app(self, config=None):
        """Create and configure Flask application

        config is an optional mapping applied over DashboardConfig.
        """
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(DashboardConfig)
        if config:
            self.app.config.update(config)

        attach_log_buffer(system_logs)

        # Initialize extensions
        self.limiter = Limiter(
            get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI']
        )

        register_error_handlers(self.app)

        # One service instance per registered component, bound to this app's config
        services = create_services(self.app.config)
        self.app.extensions[EXTENSION_KEY] = services

        # Initialize components
        init_parameter_inputs(self.app)
        init_file_upload(self.app)
        init_system_logs(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        logger.info(f"Dashboard created with components: {', '.join(services)}")
        return self.app

    def run(self):
        """Start the dashboard application"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']

        logger.info("=" * 60)
        logger.info("Parameter Dashboard")
        logger.info(f"Starting on: http://{host}:{port}")
        logger.info("Endpoints:")
        logger.info("   - Dashboard: /")
        logger.info("   - Sliders:   /api/sliders")
        logger.info("   - Upload:    POST /api/upload")
        logger.info("   - Logs:      /api/logs")
        logger.info("=" * 60)

        self.app.run(host=host, port=port, debug=False)


def create_app(config=None):
    """Application factory for flask --app and WSGI servers"""
    return DashboardApp().create_app(config)


def main():
    """Main entry point"""
    logging.basicConfig(level=logging.INFO)
    dashboard = DashboardApp()
    dashboard.create_app()
    dashboard.run()


if __name__ == '__main__':
    main()
