"""Business domain service."""

from typing import Optional
from bukukas.database.base import Database
from bukukas.domain.entities import Business as BusinessEntity
from bukukas.domain.errors import ValidationError


class BusinessService:
    """Service for managing businesses."""

    def __init__(self, db: Database):
        """Initialize business service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_business(self, name: str, image: Optional[str] = None) -> str:
        """Create a new business.

        Args:
            name: Business name
            image: Optional image URL used by the presentation layer

        Returns:
            Business ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If a business with the same name exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Business name is required")
        return self.db.create_business(name=name, image=image)

    def get_business(self, business_id: str) -> Optional[BusinessEntity]:
        """Get business by ID.

        Args:
            business_id: Business ID

        Returns:
            Business entity or None if not found
        """
        return self.db.get_business(business_id)

    def list_businesses(self) -> list[BusinessEntity]:
        """List all businesses.

        Returns:
            List of business entities ordered by name
        """
        return self.db.list_businesses()

    def rename_business(
        self, business_id: str, name: str, image: Optional[str] = None
    ) -> None:
        """Rename a business.

        Args:
            business_id: Business ID to rename
            name: New business name
            image: Optional new image (if None, image is not updated)

        Raises:
            ValidationError: If the name is empty
            NotFoundError: If business not found
            ConflictError: If the name already exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Business name is required")
        self.db.update_business(business_id=business_id, name=name, image=image)

    def delete_business(self, business_id: str) -> None:
        """Delete a business.

        Args:
            business_id: Business ID to delete

        Raises:
            NotFoundError: If business not found
            DependencyError: If the business still has transactions
        """
        self.db.delete_business(business_id)
