"""Feature modules: one package per CRM area."""
