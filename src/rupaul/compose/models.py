"""Pydantic models for the generated docker-compose descriptor."""

from typing import Dict, List
from pydantic import BaseModel


class ServiceSpec(BaseModel):
    """A single docker-compose service."""
    build: str = "."
    image: str
    volumes: List[str] = []
    ports: List[str] = []
    environment: Dict[str, str] = {}


class ComposeDescriptor(BaseModel):
    """A docker-compose file with exactly one service, keyed by application name."""
    version: str = "3"
    services: Dict[str, ServiceSpec] = {}
