"""
Integration Tests for health endpoints and app wiring
"""

from stk_gateway.providers.mpesa_provider import MPesaProvider


class TestHealth:

    def test_root_health(self, client):
        response = client.get('/')

        assert response.status_code == 200
        data = response.get_json()
        assert data['message'] == 'Server is up and running!'
        assert 'http://localhost:3000' in data['allowedOrigins']
        assert r'.*\.vercel\.app$' in data['allowedOrigins']

    def test_liveness(self, client):
        response = client.get('/health/live')

        assert response.status_code == 200
        assert response.get_json()['status'] == 'alive'

    def test_unknown_route_is_json(self, client):
        response = client.get('/api/nope')

        assert response.status_code == 404
        assert response.get_json()['error'] == 'Not found'

    def test_wrong_method_is_json(self, client):
        response = client.get('/api/stk')

        assert response.status_code == 405
        assert response.get_json()['error'] == 'Method not allowed'


class TestCors:

    def test_allowed_origin(self, client):
        response = client.get('/', headers={'Origin': 'http://localhost:3000'})
        assert response.headers.get('Access-Control-Allow-Origin') == 'http://localhost:3000'
        assert response.headers.get('Access-Control-Allow-Credentials') == 'true'

    def test_vercel_preview_origin(self, client):
        response = client.get('/', headers={'Origin': 'https://my-branch.vercel.app'})
        assert response.headers.get('Access-Control-Allow-Origin') == 'https://my-branch.vercel.app'

    def test_disallowed_origin(self, client):
        response = client.get('/', headers={'Origin': 'https://evil.example.com'})
        assert 'Access-Control-Allow-Origin' not in response.headers


class TestAppWiring:

    def test_services_built_from_config(self, app):
        state = app.extensions['mpesa']

        assert isinstance(state['provider'], MPesaProvider)
        assert state['settings'].shortcode == '174379'
        assert state['stk_service'].token_provider == state['provider'].get_access_token
        assert state['stk_service'].transport == state['provider'].post
