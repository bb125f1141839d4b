"""Projects: budgeted, deadlined work for a client."""

from .service import ProjectGateway

__all__ = ["ProjectGateway"]
