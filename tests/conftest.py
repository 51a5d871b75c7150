"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from store.manager import StoreManager
from tests.helpers import write_export


SAMPLE_CATEGORIES = [
    {
        "id": "1",
        "name": "Fournisseurs",
        "description": "Prestataires et fournisseurs",
        "entity_category": "fournisseur",
        "parent_category_id": None,
        "tenant_id": "t-1",
        "is_base_template": False,
    },
    {
        "id": "2",
        "name": "Fournisseurs IT",
        "description": "Hébergement, SaaS, infogérance",
        "entity_category": "fournisseur",
        "parent_category_id": "1",
        "tenant_id": "t-1",
    },
    {
        "id": "3",
        "name": "Clients",
        "entity_category": "client",
        "parent_category_id": None,
        "tenant_id": None,
        "is_base_template": True,
    },
    {
        "id": "4",
        "name": "Cloud",
        "description": "Hyperscalers",
        "entity_category": "sous_traitant",
        "parent_category_id": "2",
        "tenant_id": "t-1",
    },
]


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary export.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "ecotree",
        data_dir=tmp_path / "ecotree" / "data",
        data_filename="categories.json",
        log_level="DEBUG",
        log_dir=tmp_path / "ecotree" / "logs",
        log_to_file=True,
        preserve_expansion=False,
        tree_indent=2,
    )


@pytest.fixture
def sample_payload():
    """A paginated listing payload with a three-level hierarchy."""
    return {"items": [dict(item) for item in SAMPLE_CATEGORIES], "total": len(SAMPLE_CATEGORIES)}


@pytest.fixture
def export_file(test_config, sample_payload):
    """Write the sample payload to the configured export path."""
    return write_export(test_config.data_path, sample_payload)


@pytest.fixture
def services(test_config, export_file):
    """Create a Services container reading the sample export.

    Args:
        test_config: Test configuration fixture.
        export_file: Sample export written to the configured path.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, store_manager=StoreManager(test_config))
