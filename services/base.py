"""Base services container for dependency injection."""

from config import Config
from store.manager import StoreManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a different store for testing.

    Args:
        config: Application configuration object.
        store_manager: Optional store manager. If provided, config.data_path is ignored.
    """

    def __init__(self, config: Config, store_manager=None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            store_manager: Optional store manager for dependency injection (testing).
                           If None, creates StoreManager from config.
        """
        self.config = config
        self.store_manager = store_manager or StoreManager(config)

        # Lazy import to avoid circular dependencies
        from services.categories import CategoryService

        self.categories = CategoryService(self.store_manager)
