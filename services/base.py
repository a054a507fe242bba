"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject mock services for testing.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config is ignored.
        keyword_map: Optional keyword table. If None, loaded from config.keywords_path
                     or the bundled keywords.yaml.
    """

    def __init__(self, config: Config, db_manager=None, keyword_map=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.subcategories import SubcategoryService
        from services.merchants import MerchantService
        from classification.keywords import load_keyword_map
        from classification.keyword_matcher import KeywordMatcher
        from classification.merchant_matcher import MerchantMatcher
        from classification.engine import SubcategoryClassifier

        self.subcategories = SubcategoryService(self.db_manager)
        self.merchants = MerchantService(self.db_manager)

        if keyword_map is None:
            keyword_map = load_keyword_map(config.keywords_path)
        self.keyword_map = keyword_map

        self.classifier = SubcategoryClassifier(
            self.subcategories,
            MerchantMatcher(self.merchants),
            KeywordMatcher(self.keyword_map),
        )
