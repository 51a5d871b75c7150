"""Category models for the external ecosystem hierarchy."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# Known entity categories and their display labels
ENTITY_CATEGORY_OPTIONS: Dict[str, str] = {
    "client": "Client",
    "fournisseur": "Fournisseur",
    "sous_traitant": "Sous-traitant",
    "partenaire": "Partenaire",
    "autre": "Autre",
}

DEFAULT_ENTITY_CATEGORY = "autre"


def get_category_label(entity_category: Optional[str]) -> str:
    """Get the display label for an entity category.

    Unknown values are shown as-is, a missing value falls back to "Autre".
    """
    if entity_category in ENTITY_CATEGORY_OPTIONS:
        return ENTITY_CATEGORY_OPTIONS[entity_category]
    return entity_category or ENTITY_CATEGORY_OPTIONS[DEFAULT_ENTITY_CATEGORY]


@dataclass
class CategoryRecord:
    """Represents one category as returned by the categories listing.

    Attributes:
        id: Opaque identifier, unique within one listing.
        name: Display name.
        description: Optional free-text description.
        entity_category: Optional entity tag (client, fournisseur, ...).
        parent_id: Optional id of the parent category.
        short_code: Optional short code.
        tenant_id: Owning tenant, None for universal categories.
        is_base_template: Whether the category comes from the base template.
        hierarchy_level: Level reported by the backend, not interpreted.
        stakeholder_type: Stakeholder scope (e.g. "external").
        status: Lifecycle status.
        created_at: Creation timestamp, kept as received.
        updated_at: Update timestamp, kept as received.
        extra: Any other fields present in the payload.
    """

    id: str
    name: str
    description: Optional[str] = None
    entity_category: Optional[str] = None
    parent_id: Optional[str] = None
    short_code: Optional[str] = None
    tenant_id: Optional[str] = None
    is_base_template: bool = False
    hierarchy_level: Optional[int] = None
    stakeholder_type: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_universal(self) -> bool:
        """True for categories shared by every tenant."""
        return not self.tenant_id or self.is_base_template

    @property
    def label(self) -> str:
        return get_category_label(self.entity_category)


@dataclass
class CategoryNode:
    """A category placed in the hierarchy.

    ``is_expanded`` is view state only: it is never read from the record and
    is reset to False whenever a forest is rebuilt.
    """

    record: CategoryRecord
    children: List["CategoryNode"] = field(default_factory=list)
    is_expanded: bool = False

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def parent_id(self) -> Optional[str]:
        return self.record.parent_id

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0
