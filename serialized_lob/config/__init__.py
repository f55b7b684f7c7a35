from .config import BaseConfig, LobConfig
