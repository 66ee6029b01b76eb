"""
Конфигурация парсера: settings (константы, env) + parser.yaml (словари).
"""

from .config_loader import ConfigLoader, ParserConfig

__all__ = [
    "ConfigLoader",
    "ParserConfig",
]
