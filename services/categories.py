"""Category service for loading the category listing."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from models.category import CategoryRecord
from logger import get_logger

logger = get_logger()


# Pydantic schema for one item of the categories listing
class CategoryPayload(BaseModel):
    """Single category as found in a listing payload."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    name: str
    description: Optional[str] = None
    entity_category: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("entity_category", "entityCategory")
    )
    parent_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("parent_category_id", "parent_id", "parentId"),
    )
    short_code: Optional[str] = None
    tenant_id: Optional[str] = None
    is_base_template: bool = False
    hierarchy_level: Optional[int] = None
    stakeholder_type: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("parent_id", mode="before")
    @classmethod
    def empty_parent_is_none(cls, value):
        # Forms send "" for "no parent"
        if value == "":
            return None
        return value

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def timestamp_as_text(cls, value):
        # YAML exports decode unquoted timestamps into datetime objects
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value

    def to_record(self) -> CategoryRecord:
        return CategoryRecord(
            id=self.id,
            name=self.name,
            description=self.description,
            entity_category=self.entity_category,
            parent_id=self.parent_id,
            short_code=self.short_code,
            tenant_id=self.tenant_id,
            is_base_template=self.is_base_template,
            hierarchy_level=self.hierarchy_level,
            stakeholder_type=self.stakeholder_type,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
            extra=dict(self.model_extra or {}),
        )


def _extract_items(payload: Any) -> List[Any]:
    """Get the list of items from a listing payload.

    The listing returns either a bare list or a paginated object with an
    ``items`` list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        items = payload.get("items", [])
        if isinstance(items, list):
            return items
        raise ValueError("'items' in category payload must be a list")
    if payload is None:
        return []
    raise ValueError(
        f"Unsupported category payload: expected a list or an object with 'items', "
        f"got {type(payload).__name__}"
    )


class CategoryService:
    """Service for reading categories."""

    def __init__(self, store_manager):
        """Initialize the category service.

        Args:
            store_manager: Store manager giving access to the category export.
        """
        self.store_manager = store_manager
        self._records: Optional[List[CategoryRecord]] = None

    def find_all(self) -> List[CategoryRecord]:
        """Get all categories from the export.

        The export is read and validated once per service; call ``reload``
        to pick up changes to the file.

        Returns:
            List of CategoryRecord objects, in listing order.

        Raises:
            FileNotFoundError: If the export does not exist.
            ValueError: If the payload or one of its items is invalid.
        """
        if self._records is None:
            self._records = self._load()
        return list(self._records)

    def reload(self) -> List[CategoryRecord]:
        """Forget the cached listing and read the export again."""
        self._records = None
        return self.find_all()

    def _load(self) -> List[CategoryRecord]:
        items = _extract_items(self.store_manager.read_payload())

        records = []
        for index, item in enumerate(items):
            try:
                records.append(CategoryPayload.model_validate(item).to_record())
            except ValidationError as e:
                logger.error(f"Invalid category at index {index}: {e}")
                raise ValueError(f"Invalid category at index {index}: {e}") from e

        logger.debug(f"Loaded {len(records)} categories")
        return records

    def find(self, category_id: str) -> Optional[CategoryRecord]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            The last CategoryRecord with that id, None if not found.
        """
        found = None
        for record in self.find_all():
            if record.id == category_id:
                found = record
        return found

    def find_by_name(self, name: str) -> Optional[CategoryRecord]:
        """Get a single category by name (case-sensitive).

        Args:
            name: The category name to find.

        Returns:
            First CategoryRecord with that name, None if not found.
        """
        for record in self.find_all():
            if record.name == name:
                return record
        return None

    def children_of(self, category_id: str) -> List[CategoryRecord]:
        """Get the direct children of a category, in listing order."""
        return [record for record in self.find_all() if record.parent_id == category_id]

    @staticmethod
    def to_dict(record: CategoryRecord) -> Dict[str, Any]:
        """Serialize a record back to the listing shape."""
        data = dict(record.extra)
        data.update(
            {
                "id": record.id,
                "name": record.name,
                "description": record.description,
                "entity_category": record.entity_category,
                "parent_category_id": record.parent_id,
                "short_code": record.short_code,
                "tenant_id": record.tenant_id,
                "is_base_template": record.is_base_template,
                "hierarchy_level": record.hierarchy_level,
                "stakeholder_type": record.stakeholder_type,
                "status": record.status,
                "created_at": record.created_at,
                "updated_at": record.updated_at,
            }
        )
        return data
