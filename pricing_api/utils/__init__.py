"""
Utility modules for the pricing API
"""
from .config_loader import ServiceConfig, load_service_config

__all__ = [
    'ServiceConfig',
    'load_service_config',
]
