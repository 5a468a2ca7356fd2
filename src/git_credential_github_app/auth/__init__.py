from .app_jwt import JWT_LIFETIME, AppIdentity, AppJwt, sign_app_jwt
from .keys import load_private_key

__all__ = ["JWT_LIFETIME", "AppIdentity", "AppJwt", "load_private_key", "sign_app_jwt"]
