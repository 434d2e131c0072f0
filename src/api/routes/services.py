"""Service API Routes

FastAPI routes for recurring invoice generation and client service provisioning.
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.service_request import ProvisionServiceRequestSchema
from src.app.use_cases.billing import GenerateRecurringInvoices, GenerateRecurringInvoicesResponseDTO
from src.app.use_cases.services import (
    ProvisionClientService,
    GenerateCredentials,
    ProvisionServiceCommandDTO,
    ClientServiceDTO,
    CredentialsDTO,
)
from src.app.services.billing_settings import BillingSettingsResolver
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyServicePlanRepository,
    SqlAlchemyClientServiceRepository,
    SqlAlchemySystemSettingRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyRadiusRepository,
)
from src.adapter.services import SqlAlchemyUnitOfWork, ZeroRateTaxService
from src.depends import get_session
from src.api.error import ClientError, status_for

router = APIRouter(prefix="/services", tags=["Services"])


@router.post(
    "/generate-recurring-invoices",
    response_model=GenerateRecurringInvoicesResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Invoice conflict",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_CONFLICT",
                            "message": "Recurring invoices conflict with existing invoices"
                        }
                    }
                }
            }
        }
    }
)
async def generate_recurring_invoices(
    run_date: Optional[date] = Query(default=None, alias="date"),
    session: AsyncSession = Depends(get_session)
):
    """
    Generate this month's invoices for every due recurring service.

    Safe to call repeatedly: a service already invoiced in the current month
    is skipped. The whole run commits or rolls back as one transaction.

    **Query parameters:**
    - `date` (optional): Run date, defaults to today

    **Returns:**
    - 200: `{success, message, invoices: [{invoiceNumber, clientName, serviceName, amount}]}`
    - 400: A concurrent run created a conflicting invoice
    - 500: Generation failed, nothing was written
    """
    # Create UnitOfWork, repositories and services
    uow = SqlAlchemyUnitOfWork(session)
    use_case = GenerateRecurringInvoices(
        uow=uow,
        service_repo=SqlAlchemyClientServiceRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        invoice_item_repo=SqlAlchemyInvoiceItemRepository(session),
        settings_resolver=BillingSettingsResolver(SqlAlchemySystemSettingRepository(session)),
        tax_service=ZeroRateTaxService(),
    )

    result = await use_case.execute(run_date)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    run = result.value
    return GenerateRecurringInvoicesResponseDTO(
        success=True,
        message=f"Generated {run.invoices_created} recurring invoice(s)",
        invoices=run.invoices,
    )


@router.get(
    "/generate-credentials",
    response_model=CredentialsDTO,
    status_code=status.HTTP_200_OK,
)
async def generate_credentials():
    """
    Suggest a random RADIUS username/password pair.

    Nothing is stored; uniqueness is only enforced when a service is created.
    """
    result = await GenerateCredentials().execute()
    return result.value


@router.post(
    "/client-services",
    response_model=ClientServiceDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Duplicate username",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "USERNAME_ALREADY_EXISTS",
                            "message": "Username already exists"
                        }
                    }
                }
            }
        },
        404: {"description": "Client or service plan not found"},
    }
)
async def create_client_service(
    request: ProvisionServiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Provision a client service with RADIUS credentials.

    Blank `username`/`password` are generated. A `Cleartext-Password`
    radcheck entry is written in the same transaction.

    **Returns:**
    - 201: Service created
    - 400: Username already exists or invalid parameters
    - 404: Client or service plan not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = ProvisionClientService(
        uow=uow,
        client_repo=SqlAlchemyClientRepository(session),
        plan_repo=SqlAlchemyServicePlanRepository(session),
        service_repo=SqlAlchemyClientServiceRepository(session),
        radius_repo=SqlAlchemyRadiusRepository(session),
    )

    command = ProvisionServiceCommandDTO(
        client_id=request.client_id,
        service_plan_id=request.service_plan_id,
        username=request.username,
        password=request.password,
        activation_date=request.activation_date,
        recurring_billing_enabled=request.recurring_billing_enabled,
        billing_day_of_month=request.billing_day_of_month,
        days_until_due=request.days_until_due,
        notes=request.notes,
    )

    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=status_for(result.error))

    return result.value
