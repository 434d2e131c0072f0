"""GenerateRecurringInvoices Use Case

Creates this month's invoice for every active, recurring-billed service
that is due. Shared by the HTTP trigger and the scheduled worker.
"""

import logging
from datetime import date, timedelta
from typing import Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.billing_settings import BillingSettingsResolver
from src.app.services.tax_service import TaxService
from src.app.repositories.client_service_repository import ClientServiceRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.base import to_money
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from .dtos import GeneratedInvoiceDTO, RecurringInvoiceRunDTO

logger = logging.getLogger(__name__)


class GenerateRecurringInvoices:
    """
    Use Case: Generate recurring invoices for due services

    Business Rules:
    1. Only active services with recurring billing enabled are considered
    2. Candidates: billing day is today, never invoiced, or last invoiced in another month
    3. A service already invoiced in the current calendar month is skipped
    4. Due date = issue date + effective days until due
    5. One invoice (status=pending) with exactly one item per service
    6. last_invoice_date advances to the issue date
    7. All-or-nothing: any failure rolls back the whole run

    Flow:
    1. Resolve billing settings
    2. Select candidate services
    3. For each candidate: lock, re-check, create invoice + item, advance marker
    4. Commit transaction
    5. Return run summary
    """

    def __init__(
        self,
        uow: UnitOfWork,
        service_repo: ClientServiceRepository,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        settings_resolver: BillingSettingsResolver,
        tax_service: TaxService,
    ):
        self.uow = uow
        self.service_repo = service_repo
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.settings_resolver = settings_resolver
        self.tax_service = tax_service

    async def execute(self, today: Optional[date] = None) -> Result[RecurringInvoiceRunDTO]:
        """
        Execute recurring invoice generation

        Args:
            today: Run date (defaults to the current local date)

        Returns:
            Result[RecurringInvoiceRunDTO]: Run summary or error
        """
        today = today or date.today()
        billing_period = today.strftime("%Y-%m")

        try:
            # Step 1: Resolve system billing defaults
            settings = await self.settings_resolver.resolve()
            logger.info(
                f"Recurring invoice run for {today.isoformat()}: "
                f"default billing day {settings.default_billing_day}, "
                f"default days to pay {settings.default_days_to_pay}"
            )

            # Step 2: Broad candidate selection
            candidates = await self.service_repo.get_billing_candidates(
                today, settings.default_billing_day
            )
            logger.info(f"Found {len(candidates)} candidate service(s)")

            skipped = 0
            created = []

            for service, plan, client in candidates:
                # Step 3a: Lock the service row and re-read its marker
                locked = await self.service_repo.get_by_id(service.id, for_update=True)
                if locked is None:
                    skipped += 1
                    continue

                # Step 3b: Authoritative monthly dedup
                if locked.invoiced_in_month(today) or await self.invoice_repo.exists_for_period(
                    locked.id, billing_period
                ):
                    logger.info(f"Skipping service {locked.username} - already invoiced this month")
                    skipped += 1
                    continue

                # Step 3c: Amounts and dates
                issue_date = today
                due_date = issue_date + timedelta(days=settings.days_until_due_for(locked))
                subtotal = to_money(plan.price)
                tax = to_money(self.tax_service.calculate(client, subtotal))
                total = subtotal + tax

                invoice_number = await self.invoice_repo.generate_invoice_number(issue_date.year)

                # Step 3d: Invoice and its single item
                invoice = await self.invoice_repo.create(
                    Invoice(
                        invoice_number=invoice_number,
                        client_id=client.id,
                        client_service_id=locked.id,
                        billing_period=billing_period,
                        issue_date=issue_date,
                        due_date=due_date,
                        subtotal=subtotal,
                        tax=tax,
                        total=total,
                        amount_paid=to_money(0),
                        status=InvoiceStatus.PENDING,
                        notes=f"Recurring invoice for {locked.username}",
                    )
                )

                await self.invoice_item_repo.create(
                    InvoiceItem(
                        invoice_id=invoice.id,
                        client_service_id=locked.id,
                        description=f"{plan.name} - {plan.billing_cycle} billing",
                        quantity=to_money(1),
                        unit_price=subtotal,
                        total=subtotal,
                    )
                )

                # Step 3e: Advance the service marker
                locked.last_invoice_date = issue_date
                await self.service_repo.update(locked)

                created.append(
                    GeneratedInvoiceDTO(
                        invoice_number=invoice.invoice_number,
                        client_name=client.company_name,
                        service_name=plan.name,
                        amount=total,
                        invoice_id=invoice.id,
                        client_service_id=locked.id,
                    )
                )
                logger.info(
                    f"Created invoice {invoice.invoice_number} for {client.company_name} - {total}"
                )

            # Step 4: Commit the whole run
            await self.uow.commit()

            # Step 5: Build response
            return Return.ok(
                RecurringInvoiceRunDTO(
                    run_date=today,
                    candidates=len(candidates),
                    skipped=skipped,
                    invoices=created,
                )
            )

        except IntegrityError as e:
            await self.uow.rollback()
            logger.error(f"Recurring invoice run rolled back on constraint violation: {e}")
            return Return.err(
                Error(
                    code="INVOICE_CONFLICT",
                    message="An invoice with the same number or billing period already exists; "
                            "no invoices were generated",
                    reason=str(e.orig) if e.orig is not None else str(e),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception("Recurring invoice run failed")
            return Return.err(
                Error(
                    code="GENERATE_RECURRING_INVOICES_FAILED",
                    message="Failed to generate recurring invoices",
                    reason=str(e),
                )
            )
