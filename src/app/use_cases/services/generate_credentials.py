"""GenerateCredentials Use Case"""

from libs.result import Result, Return
from src.app.services.credentials_generator import generate_username, generate_password
from .dtos import CredentialsDTO


class GenerateCredentials:
    """Suggest a username/password pair; nothing is reserved or stored"""

    async def execute(self) -> Result[CredentialsDTO]:
        return Return.ok(
            CredentialsDTO(
                username=generate_username(),
                password=generate_password(),
            )
        )
