"""ProvisionClientService Use Case

Creates a client's subscription to a plan together with the RADIUS check
entry the access server authenticates against.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.credentials_generator import generate_username, generate_password
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.service_plan_repository import ServicePlanRepository
from src.app.repositories.client_service_repository import ClientServiceRepository
from src.app.repositories.radius_repository import RadiusRepository
from src.domain.client_service import ClientService, ServiceStatus
from src.domain.radius import RadCheck, CLEARTEXT_PASSWORD
from .dtos import ProvisionServiceCommandDTO, ClientServiceDTO

logger = logging.getLogger(__name__)


def is_duplicate_username(reason: str) -> bool:
    """True when a constraint message reports the unique username being taken"""
    message = reason.lower()
    return "username" in message and ("unique" in message or "duplicate" in message)


class ProvisionClientService:
    """
    Use Case: Provision a client service

    Business Rules:
    1. Client and service plan must exist
    2. Blank username/password are replaced by generated credentials
    3. Username must be unique (enforced by the database)
    4. A Cleartext-Password radcheck row is written for the username
    5. Service row and radcheck row are committed together

    Flow:
    1. Check client and plan
    2. Fill credentials
    3. Create service and radcheck entry
    4. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        plan_repo: ServicePlanRepository,
        service_repo: ClientServiceRepository,
        radius_repo: RadiusRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.plan_repo = plan_repo
        self.service_repo = service_repo
        self.radius_repo = radius_repo

    async def execute(self, command: ProvisionServiceCommandDTO) -> Result[ClientServiceDTO]:
        try:
            # Step 1: Referenced rows must exist
            client = await self.client_repo.get_by_id(command.client_id)
            if not client:
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                    )
                )

            plan = await self.plan_repo.get_by_id(command.service_plan_id)
            if not plan:
                return Return.err(
                    Error(
                        code="SERVICE_PLAN_NOT_FOUND",
                        message=f"Service plan {command.service_plan_id} not found",
                    )
                )

            # Step 2: Fill blank credentials
            username = (command.username or "").strip() or generate_username()
            password = command.password or generate_password()

            # Step 3: Create service and RADIUS entry
            service = await self.service_repo.create(
                ClientService(
                    client_id=client.id,
                    service_plan_id=plan.id,
                    username=username,
                    password=password,
                    status=ServiceStatus.ACTIVE,
                    recurring_billing_enabled=command.recurring_billing_enabled,
                    billing_day_of_month=command.billing_day_of_month,
                    days_until_due=command.days_until_due,
                    activation_date=command.activation_date,
                    notes=command.notes,
                )
            )

            await self.radius_repo.add_check(
                RadCheck(
                    username=username,
                    attribute=CLEARTEXT_PASSWORD,
                    op=":=",
                    value=password,
                )
            )

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(f"Provisioned service {service.id} ({username}) for client {client.id}")

            return Return.ok(
                ClientServiceDTO(
                    id=service.id,
                    client_id=service.client_id,
                    service_plan_id=service.service_plan_id,
                    username=service.username,
                    password=service.password,
                    status=service.status.value,
                    recurring_billing_enabled=service.recurring_billing_enabled,
                    billing_day_of_month=service.billing_day_of_month,
                    days_until_due=service.days_until_due,
                    last_invoice_date=service.last_invoice_date,
                    activation_date=service.activation_date,
                    notes=service.notes,
                    created_at=service.created_at,
                )
            )

        except IntegrityError as e:
            await self.uow.rollback()
            reason = str(e.orig) if e.orig is not None else str(e)
            logger.warning(f"Service provisioning rejected by constraint: {reason}")
            if is_duplicate_username(reason):
                return Return.err(
                    Error(
                        code="USERNAME_ALREADY_EXISTS",
                        message="Username already exists",
                        reason=reason,
                    )
                )
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Service data violates a database constraint",
                    reason=reason,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to provision service for client {command.client_id}")
            return Return.err(
                Error(
                    code="PROVISION_SERVICE_FAILED",
                    message="Failed to create client service",
                    reason=str(e),
                )
            )
