"""
docker-compose descriptor models and generation.
"""

from .models import ComposeDescriptor, ServiceSpec
from .builder import build_service, build_compose, render_compose, write_compose

__all__ = [
    'ComposeDescriptor',
    'ServiceSpec',
    'build_service',
    'build_compose',
    'render_compose',
    'write_compose',
]
