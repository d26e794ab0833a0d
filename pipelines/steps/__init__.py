# Namespace for pipeline steps
from .resolve_handle import ResolveHandle  # noqa: F401
from .fetch_profile import FetchProfile  # noqa: F401
from .normalize_profile import NormalizeProfile  # noqa: F401
