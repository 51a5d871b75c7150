"""State of the category tree screen."""

from typing import List, Optional, Sequence
from models.category import CategoryNode, CategoryRecord
from hierarchy.builder import build_tree, detached_records
from hierarchy.expansion import (
    expanded_ids,
    restore_expansion,
    set_all_expanded,
    toggle_expansion,
)
from hierarchy.search import filter_tree
from logger import get_logger

logger = get_logger()


class CategoryTreeView:
    """Holds the canonical forest and the current search term.

    Toggles replace the stored forest. The search term is kept separately
    and only applied when the visible forest is requested, so clearing it
    gives back exactly what the user had open before searching.

    Args:
        preserve_expansion: Reapply the open branches after each ``load``.
            When False, every reload starts fully collapsed.
    """

    def __init__(self, preserve_expansion: bool = False):
        self.preserve_expansion = preserve_expansion
        self.records: List[CategoryRecord] = []
        self.forest: List[CategoryNode] = []
        self.search_term = ""

    @property
    def total(self) -> int:
        """Number of records in the last load."""
        return len(self.records)

    def load(self, records: Sequence[CategoryRecord]) -> List[CategoryNode]:
        """Rebuild the forest from a fresh listing.

        Args:
            records: Category records from the listing.

        Returns:
            The new stored forest.
        """
        previously_open = expanded_ids(self.forest)

        self.records = list(records)
        forest = build_tree(self.records)
        if self.preserve_expansion and previously_open:
            forest = restore_expansion(forest, previously_open)
        self.forest = forest

        detached = detached_records(self.records, forest)
        if detached:
            logger.warning(
                f"{len(detached)} categories are unreachable from any root "
                f"(duplicate ids or parent cycle): "
                f"{', '.join(record.id for record in detached)}"
            )

        logger.debug(f"Loaded {len(self.records)} categories, {len(forest)} roots")
        return self.forest

    def toggle(self, category_id: str) -> List[CategoryNode]:
        """Open or close one branch."""
        self.forest = toggle_expansion(self.forest, category_id)
        return self.forest

    def expand_all(self) -> List[CategoryNode]:
        self.forest = set_all_expanded(self.forest, True)
        return self.forest

    def collapse_all(self) -> List[CategoryNode]:
        self.forest = set_all_expanded(self.forest, False)
        return self.forest

    def search(self, term: str) -> Sequence[CategoryNode]:
        """Set the search term and return the visible forest."""
        self.search_term = term
        return self.visible()

    def visible(self) -> Sequence[CategoryNode]:
        """The forest as shown: stored forest filtered by the search term."""
        return filter_tree(self.forest, self.search_term)

    def parent_options(self, exclude_id: Optional[str] = None) -> List[CategoryRecord]:
        """Records that can be picked as parent in a create/edit form.

        Args:
            exclude_id: Id of the category being edited, which cannot be its
                own parent.
        """
        return [record for record in self.records if record.id != exclude_id]
