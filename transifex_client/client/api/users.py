from transifex_client.client.http_client import HTTPClient
from transifex_client.client.resource_classes.user import User
from transifex_client.client.tx_client import Endpoint, TXResourceAPI


class UsersAPI(TXResourceAPI[User]):
    def __init__(self, http_client: HTTPClient) -> None:
        super().__init__(
            http_client,
            method_endpoint_map={"retrieve": Endpoint("/users/{id}")},
            resource_cls=User,
        )

    def retrieve(self, user_id: str) -> User:
        """Get the details of a user, e.g. "u:username"."""
        return self._retrieve(user_id, name="user_id")
