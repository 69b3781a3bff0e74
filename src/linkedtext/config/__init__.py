from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import LinkedTextConfig

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "LinkedTextConfig",
    "load_config",
]
