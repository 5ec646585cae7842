"""値オブジェクト"""
from cartline.domain.value_objects.application_config import ApplicationConfig
from cartline.domain.value_objects.identity_hasher import IdentityHasher, KeyOrder

__all__ = ["ApplicationConfig", "IdentityHasher", "KeyOrder"]
