from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db
from repositories.organizations import OrganizationRepository
from schemas.organizations import OrganizationCreate, OrganizationResponse, OrganizationUpdate

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.post("", response_model=OrganizationResponse, status_code=201)
async def create_organization(body: OrganizationCreate, db: AsyncSession = Depends(get_db)):
    return await OrganizationRepository(db).create(body.model_dump())


@router.get("", response_model=List[OrganizationResponse])
async def list_organizations(db: AsyncSession = Depends(get_db)):
    return await OrganizationRepository(db).list()


@router.get("/{organization_id}", response_model=OrganizationResponse)
async def get_organization(organization_id: int, db: AsyncSession = Depends(get_db)):
    return await OrganizationRepository(db).get(organization_id)


@router.put("/{organization_id}", response_model=OrganizationResponse)
async def update_organization(
    organization_id: int,
    body: OrganizationUpdate,
    db: AsyncSession = Depends(get_db)
):
    return await OrganizationRepository(db).update(organization_id, body.model_dump(exclude_unset=True))


@router.delete("/{organization_id}", status_code=204)
async def delete_organization(organization_id: int, db: AsyncSession = Depends(get_db)):
    await OrganizationRepository(db).delete(organization_id)
    return Response(status_code=204)
