from .raw_profile import RawProfileDocument, Unparseable
from .display_model import DisplayModel
from .lookup_request import LookupRequest

__all__ = [
    "RawProfileDocument",
    "Unparseable",
    "DisplayModel",
    "LookupRequest",
]
