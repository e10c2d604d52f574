"""Storage address routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.transport_service.models import Address
from services.transport_service.repositories import AddressRepository
from services.transport_service.routers._helpers import require_logistics
from services.transport_service.schemas import AddressCreate, AddressResponse
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("", response_model=List[AddressResponse])
async def list_addresses(
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    return await AddressRepository(db).find_all()


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(
    payload: AddressCreate,
    current_user: AuthUser = Depends(require_logistics),
    db: AsyncSession = Depends(get_async_db),
):
    address = Address(**payload.model_dump())
    address.country_iso = address.country_iso.upper()
    return await AddressRepository(db).persist(address)
