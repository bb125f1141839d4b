"""Freelancer CRM - clients, projects and reminders against the CRM REST API.

Usage:
    from freelancer_crm.app import AppContext
    from freelancer_crm.config import load_config

    ctx = AppContext.create(load_config())
    clients = await ctx.clients.list_all(ctx.session.user.id)
"""

__version__ = "0.3.0"
