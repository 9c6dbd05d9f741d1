from .core import get_config, validate_config
