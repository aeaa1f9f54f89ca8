from datetime import datetime
from typing import Literal, TypedDict

ConnectionStatus = Literal["pending", "accepted"]


class ConnectionDocument(TypedDict, total=False):
    _id: str
    # requester
    user_id: str
    connected_user_id: str
    status: ConnectionStatus
    created_at: datetime
    # sorted user ids, see repositories.connection_repository.pair_key
    pair_low: str
    pair_high: str
