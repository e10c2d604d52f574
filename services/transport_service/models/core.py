import uuid
from datetime import datetime
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from sqlalchemy import (
    Boolean,
    DateTime,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from services.transport_service.models.enums import Status, UserRole, enum_values


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )


class Team(TimestampMixin, Base):
    __tablename__ = "teams"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    country_iso: Mapped[str] = mapped_column(String(3), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self):
        return f"<Team {self.name}>"


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SAEnum(
            UserRole,
            name="user_role_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
        default=UserRole.MECHANIC,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # A user belongs to at most one team
    team_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True
    )

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"


class TransportCompany(TimestampMixin, Base):
    __tablename__ = "transport_companies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self):
        return f"<TransportCompany {self.name}>"


class Address(TimestampMixin, Base):
    """Street location a transport departs from or arrives at."""

    __tablename__ = "addresses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    street_name: Mapped[str] = mapped_column(String, nullable=False)
    city_name: Mapped[str] = mapped_column(String, nullable=False)
    country_iso: Mapped[str] = mapped_column(String(3), nullable=False)
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    def __repr__(self):
        return f"<Address {self.street_name}, {self.city_name}>"


class Storage(TimestampMixin, Base):
    """A team's storage site at an address."""

    __tablename__ = "storages"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    address_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("addresses.id"), nullable=False
    )
    team_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("teams.id"), nullable=False, index=True
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    def __repr__(self):
        return f"<Storage {self.id} team={self.team_id}>"


class Transport(TimestampMixin, Base):
    __tablename__ = "transports"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("transport_companies.id"), nullable=False
    )
    departure_address_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("addresses.id"), nullable=False
    )
    destination_address_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("addresses.id"), nullable=False
    )
    departure_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    arrival_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    # Stored as the display label, e.g. "In Transit"
    status: Mapped[Status] = mapped_column(
        SAEnum(
            Status,
            name="transport_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
        default=Status.PENDING,
        index=True,
    )

    def __repr__(self):
        return f"<Transport {self.id} {self.status.value}>"


class Package(TimestampMixin, Base):
    __tablename__ = "packages"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    transport_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("transports.id", ondelete="CASCADE"), nullable=False, index=True
    )
    team_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("teams.id"), nullable=False, index=True
    )

    def __repr__(self):
        return f"<Package {self.name} transport={self.transport_id}>"


class CarPart(TimestampMixin, Base):
    __tablename__ = "car_parts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # kg
    package_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("packages.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def __repr__(self):
        return f"<CarPart {self.name} package={self.package_id}>"
