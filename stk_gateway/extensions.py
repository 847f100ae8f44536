from flask import current_app
from flask_cors import CORS

from stk_gateway.config import MPesaSettings
from stk_gateway.providers.mpesa_provider import MPesaProvider
from stk_gateway.services.callback_service import CallbackService
from stk_gateway.services.stk_service import StkService

cors = CORS()


class MPesa:
    """Builds the Daraja client and services from app config and keeps them on the app"""

    extension_name = 'mpesa'

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        settings = MPesaSettings.from_mapping(app.config)
        provider = MPesaProvider(settings)
        app.extensions[self.extension_name] = {
            'settings': settings,
            'provider': provider,
            'stk_service': StkService(
                settings,
                token_provider=provider.get_access_token,
                transport=provider.post
            ),
            'callback_service': CallbackService(),
        }

    @property
    def _state(self):
        return current_app.extensions[self.extension_name]

    @property
    def settings(self) -> MPesaSettings:
        return self._state['settings']

    @property
    def provider(self) -> MPesaProvider:
        return self._state['provider']

    @property
    def stk_service(self) -> StkService:
        return self._state['stk_service']

    @property
    def callback_service(self) -> CallbackService:
        return self._state['callback_service']


mpesa = MPesa()
