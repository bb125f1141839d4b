"""Clients: the people and companies a freelancer works for."""

from .service import ClientGateway

__all__ = ["ClientGateway"]
