"""Transport company (carrier) management routes."""

import uuid

from fastapi import APIRouter, Depends, Response, status
from libs.auth.dependencies import get_current_user, require_admin
from libs.auth.models import AuthUser
from libs.common.exceptions import ConflictError, NotFoundError
from libs.common.logging import get_logger
from libs.common.pagination import Page, PageParams, page_params
from libs.db.session import get_async_db
from services.transport_service.models import TransportCompany
from services.transport_service.repositories import (
    TransportCompanyRepository,
    TransportRepository,
)
from services.transport_service.schemas import (
    TransportCompanyCreate,
    TransportCompanyResponse,
)
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

router = APIRouter(prefix="/transport-companies", tags=["transport-companies"])


@router.get("", response_model=Page[TransportCompanyResponse])
async def list_companies(
    params: PageParams = Depends(page_params),
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    repo = TransportCompanyRepository(db)
    companies = await repo.find_page(offset=params.offset, limit=params.size)
    total = await repo.count()
    return Page[TransportCompanyResponse].build(
        [TransportCompanyResponse.model_validate(c) for c in companies], params, total
    )


@router.post(
    "", response_model=TransportCompanyResponse, status_code=status.HTTP_201_CREATED
)
async def create_company(
    payload: TransportCompanyCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    repo = TransportCompanyRepository(db)
    name = payload.name.strip()
    if await repo.exists_by_name(name):
        raise ConflictError(f"Transport company '{name}' already exists.")

    company = await repo.persist(
        TransportCompany(name=name, description=payload.description)
    )
    logger.info("Created transport company %s (%s)", company.id, company.name)
    return company


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    repo = TransportCompanyRepository(db)
    if not await repo.exists_by_id(company_id):
        raise NotFoundError("Requested transport company does not exist.")
    if await TransportRepository(db).exists_by_company_id(company_id):
        raise ConflictError(
            "Transport company is still referenced by transports and cannot be deleted."
        )

    await repo.delete_by_id(company_id)
    logger.info("Deleted transport company %s", company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
