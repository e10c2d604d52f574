"""Team routes."""

import uuid

from fastapi import APIRouter, Depends, status
from libs.auth.dependencies import get_current_user, require_admin
from libs.auth.models import AuthUser
from libs.common.exceptions import ConflictError, NotFoundError
from libs.common.pagination import Page, PageParams, page_params
from libs.db.session import get_async_db
from services.transport_service.models import Team
from services.transport_service.repositories import TeamRepository, UserRepository
from services.transport_service.schemas import (
    TeamCreate,
    TeamDetailResponse,
    TeamResponse,
    UserResponse,
)
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=Page[TeamResponse])
async def list_teams(
    params: PageParams = Depends(page_params),
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    repo = TeamRepository(db)
    teams = await repo.find_page(offset=params.offset, limit=params.size)
    return Page[TeamResponse].build(
        [TeamResponse.model_validate(t) for t in teams], params, await repo.count()
    )


@router.get("/{team_id}", response_model=TeamDetailResponse)
async def get_team(
    team_id: uuid.UUID,
    current_user: AuthUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_db),
):
    """Team details including its members."""
    team = await TeamRepository(db).find_by_id(team_id)
    if team is None:
        raise NotFoundError("Requested team does not exist.")

    members = await UserRepository(db).find_by_team_id(team_id)
    return TeamDetailResponse(
        id=team.id,
        name=team.name,
        country_iso=team.country_iso,
        description=team.description,
        members=[UserResponse.model_validate(m) for m in members],
    )


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(
    payload: TeamCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    repo = TeamRepository(db)
    if await repo.exists_by_name(payload.name):
        raise ConflictError(f"Team '{payload.name}' already exists.")

    return await repo.persist(
        Team(
            name=payload.name,
            country_iso=payload.country_iso.upper(),
            description=payload.description,
        )
    )
