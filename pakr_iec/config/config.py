from functools import lru_cache

from .create_config import ConfigSingleton, PydanticConfig


# Memoized so the env files are read once per process.
@lru_cache(maxsize=1)
def get_config() -> PydanticConfig:
    return ConfigSingleton().config
