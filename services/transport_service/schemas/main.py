"""Pydantic schemas for the Transport Service."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from services.transport_service.models.enums import Status, UserRole


# ---------------------------------------------------------------------------
# Transport companies
# ---------------------------------------------------------------------------


class TransportCompanyCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class TransportCompanyResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


class AddressCreate(BaseModel):
    street_name: str = Field(..., min_length=1)
    city_name: str = Field(..., min_length=1)
    country_iso: str = Field(..., min_length=2, max_length=3)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class AddressResponse(AddressCreate):
    id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Teams and users
# ---------------------------------------------------------------------------


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1)
    country_iso: str = Field(..., min_length=2, max_length=3)
    description: Optional[str] = None


class TeamResponse(TeamCreate):
    id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    id: uuid.UUID
    email: EmailStr
    first_name: str
    last_name: str
    role: UserRole
    team_id: Optional[uuid.UUID] = None

    model_config = ConfigDict(from_attributes=True)


class TeamDetailResponse(TeamResponse):
    members: List[UserResponse] = []


# ---------------------------------------------------------------------------
# Storages
# ---------------------------------------------------------------------------


class StorageCreate(BaseModel):
    address_id: uuid.UUID
    capacity: int = Field(..., ge=0)
    # Admins pick the team; everyone else stores for their own team
    team_id: Optional[uuid.UUID] = None
    image_url: Optional[str] = None


class StorageResponse(BaseModel):
    id: uuid.UUID
    capacity: int
    image_url: Optional[str] = None
    location: AddressResponse
    team: TeamResponse


# ---------------------------------------------------------------------------
# Packages and car parts
# ---------------------------------------------------------------------------


class CarPartCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    weight: Optional[float] = Field(None, ge=0)
    package_id: uuid.UUID


class CarPartResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    weight: Optional[float] = None
    package_id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)


class PackageCreate(BaseModel):
    name: str = Field(..., min_length=1)
    transport_id: uuid.UUID
    team_id: uuid.UUID


class PackageResponse(BaseModel):
    id: uuid.UUID
    name: str
    transport_id: uuid.UUID
    team_id: uuid.UUID
    car_parts: List[CarPartResponse] = []

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Transports
# ---------------------------------------------------------------------------


class TransportCreate(BaseModel):
    company_id: uuid.UUID
    departure_address_id: uuid.UUID
    destination_address_id: uuid.UUID
    departure_date: datetime
    arrival_date: datetime
    # Accepted for client compatibility; new transports always start as Pending
    status: Optional[Status] = None


class TransportResponse(BaseModel):
    id: uuid.UUID
    company_id: uuid.UUID
    departure_address_id: uuid.UUID
    destination_address_id: uuid.UUID
    departure_date: datetime
    arrival_date: datetime
    status: Status
    packages: List[PackageResponse] = []

    model_config = ConfigDict(from_attributes=True)


class StatisticResponse(BaseModel):
    label: str
    count: int
