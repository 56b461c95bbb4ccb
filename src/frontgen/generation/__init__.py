from .client import generate_client
from .emitter import TypeEmitter, ts_type
from .profile import GenerationProfile
from .types import generate_types

__all__ = [
    "GenerationProfile",
    "TypeEmitter",
    "generate_client",
    "generate_types",
    "ts_type",
]
