from stk_gateway.providers.mpesa_provider import MPesaProvider

__all__ = ['MPesaProvider']
