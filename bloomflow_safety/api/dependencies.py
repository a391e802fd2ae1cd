"""
BloomFlow Safety — API Dependencies

Dependency injection for FastAPI: the engine (config, catalog, classifier,
scorer) is built once and shared by all requests. Everything it holds is
read-only, so requests never need locking.
"""

import logging
import threading
from typing import Optional

from ..config import SafetyConfig, get_default_config, load_config
from ..compliance import ComplianceScorer
from ..exceptions import BloomFlowSafetyError
from ..red_flags import RedFlagCatalog, RedFlagClassifier, load_catalog
from .config import config

logger = logging.getLogger(__name__)


class EngineManager:
    """
    Holds the configured engine components.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.reset()

    def reset(self) -> None:
        self.is_loaded = False
        self.settings: Optional[SafetyConfig] = None
        self.catalog: Optional[RedFlagCatalog] = None
        self.classifier: Optional[RedFlagClassifier] = None
        self.scorer: Optional[ComplianceScorer] = None
        self.error: Optional[str] = None

    def load(
        self,
        settings: Optional[SafetyConfig] = None,
        catalog: Optional[RedFlagCatalog] = None,
    ) -> bool:
        """
        Build the engine.

        Args:
            settings: SafetyConfig (default: config_path from APIConfig, or defaults)
            catalog: Red-flag catalog (default: catalog_path, or bundled)

        Returns:
            True when the engine is ready
        """
        with self._lock:
            try:
                if settings is None:
                    settings = (
                        load_config(config.config_path)
                        if config.config_path else get_default_config()
                    )
                if catalog is None:
                    catalog = load_catalog(config.catalog_path or settings.classifier.catalog_path)

                self.settings = settings
                self.catalog = catalog
                self.classifier = RedFlagClassifier(catalog, settings.classifier)
                self.scorer = ComplianceScorer(settings.compliance)
                self.error = None
                self.is_loaded = True
                logger.info("Engine ready: catalog %s, %d patterns",
                            catalog.version, len(catalog))
                return True

            except BloomFlowSafetyError as e:
                self.error = str(e)
                self.is_loaded = False
                logger.error("Engine failed to load: %s", e)
                return False


# Global manager
engine_manager = EngineManager()


class EngineUnavailable(BloomFlowSafetyError):
    """Engine could not be loaded"""


def get_engine() -> EngineManager:
    """Dependency: loaded engine manager"""
    if not engine_manager.is_loaded:
        engine_manager.load()
    if not engine_manager.is_loaded:
        raise EngineUnavailable(engine_manager.error or "engine not loaded")
    return engine_manager
