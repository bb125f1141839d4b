"""Client gateway: CRUD on /clients."""

from ...common.api import EntityGateway
from ...common.models import Client, ClientDraft


class ClientGateway(EntityGateway[Client, ClientDraft]):
    entity = "client"
    path = "/clients"
    model = Client
