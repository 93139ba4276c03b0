from .api_key import public_api, verify_api_key

__all__ = ["public_api", "verify_api_key"]
