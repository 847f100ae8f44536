"""
Health Check Endpoints
"""

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint('health', __name__)


def _describe_origin(origin):
    return getattr(origin, 'pattern', origin)


@health_bp.route('/', methods=['GET'])
def health_check():
    """
    Basic health check endpoint

    Returns:
        200 with the origins the gateway accepts browser requests from
    """
    return jsonify({
        'message': 'Server is up and running!',
        'allowedOrigins': [_describe_origin(o) for o in current_app.config['CORS_ORIGINS']]
    }), 200


@health_bp.route('/health/live', methods=['GET'])
def liveness_probe():
    """
    Kubernetes liveness probe
    Returns 200 if the application is running
    """
    return jsonify({
        'status': 'alive',
        'timestamp': datetime.now(timezone.utc).isoformat()
    }), 200
