"""REST API access: request helper and the generic entity gateway."""

from .client import ApiClient
from .gateway import EntityGateway, parse_response

__all__ = ['ApiClient', 'EntityGateway', 'parse_response']
