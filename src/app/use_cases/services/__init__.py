from .provision_client_service import ProvisionClientService
from .generate_credentials import GenerateCredentials
from .dtos import ProvisionServiceCommandDTO, ClientServiceDTO, CredentialsDTO

__all__ = [
    "ProvisionClientService",
    "GenerateCredentials",
    "ProvisionServiceCommandDTO",
    "ClientServiceDTO",
    "CredentialsDTO",
]
