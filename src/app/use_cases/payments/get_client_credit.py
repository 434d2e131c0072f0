"""GetClientCredit Use Case

Retrieves a client's current credit balance.
"""

from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.domain.base import to_money
from .dtos import ClientCreditDTO


class GetClientCredit:
    """
    Get Client Credit Use Case

    Read-only operation.

    Errors:
        CLIENT_NOT_FOUND: No client with the given ID
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: int) -> Result[ClientCreditDTO]:
        client = await self.client_repo.get_by_id(client_id)

        if not client:
            return Return.err(
                Error(
                    code="CLIENT_NOT_FOUND",
                    message=f"Client {client_id} not found",
                )
            )

        return Return.ok(
            ClientCreditDTO(
                client_id=client.id,
                credit_balance=to_money(client.credit_balance or 0),
            )
        )
