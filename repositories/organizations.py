from models.organization import Organization
from repositories.base import CrudRepository


class OrganizationRepository(CrudRepository[Organization]):
    model = Organization
