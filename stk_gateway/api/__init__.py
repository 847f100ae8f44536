"""
API Blueprints Package
Registers all API blueprints
"""

from stk_gateway.api.stk import stk_bp
from stk_gateway.api.health import health_bp

# Export blueprints
__all__ = [
    'stk_bp',
    'health_bp',
    'register_blueprints'
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app

    Args:
        app: Flask application instance
    """

    url_base : str = app.config.get('API_PREFIX', '/api')

    app.register_blueprint(stk_bp, url_prefix=url_base)
    app.register_blueprint(health_bp)
