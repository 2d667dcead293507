import logging
from enum import Enum
from typing import List, Optional
from sqlalchemy import func
from ..config import AppConfig
from ..db.session import make_session_factory
from ..models.product import Product
from ..utils.dto import ProductDTO, to_product_dto
from .logging import log_event, set_log_level
from .sample_data import sample_products


logger = logging.getLogger(__name__)


class CatalogMode(Enum):
    FIXTURE = "fixture"
    DATABASE = "database"


class CatalogService:
    """Read-only product catalog.

    The mode is fixed at construction: without a connection string the
    service serves the sample catalog for its whole lifetime. A configured
    database that fails to answer raises; it never falls back to samples.
    """

    def __init__(self, connection_string: Optional[str] = None, session_factory=None):
        self._connection_string = (connection_string or "").strip() or None
        if self._connection_string:
            self.mode = CatalogMode.DATABASE
            self._session_factory = session_factory or make_session_factory(self._connection_string)
        else:
            self.mode = CatalogMode.FIXTURE
            self._session_factory = None
            logger.warning("No connection string configured; serving the sample catalog")
        log_event("info", "catalog.mode_selected", mode=self.mode.value)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "CatalogService":
        set_log_level(cfg.log_level)
        return cls(cfg.database_url)

    def list_all(self) -> List[ProductDTO]:
        """Return every product in storage order."""
        if self.mode is CatalogMode.FIXTURE:
            return sample_products()
        with self._session_factory() as session:
            return [to_product_dto(r) for r in session.query(Product).all()]

    def get_by_id(self, product_id: int) -> Optional[ProductDTO]:
        """Return the product with ``product_id`` or None."""
        if self.mode is CatalogMode.FIXTURE:
            return next((p for p in sample_products() if p.id == product_id), None)
        with self._session_factory() as session:
            r = session.query(Product).filter(Product.id == product_id).first()
            return to_product_dto(r) if r else None

    def list_by_category(self, category: Optional[str]) -> List[ProductDTO]:
        """Return products in ``category`` (case-insensitive); all products when empty."""
        if not category:
            return self.list_all()
        if self.mode is CatalogMode.FIXTURE:
            wanted = category.lower()
            return [p for p in sample_products() if p.category.lower() == wanted]
        # both sides through the engine's lower()
        with self._session_factory() as session:
            rows = session.query(Product).filter(func.lower(Product.category) == func.lower(category)).all()
            return [to_product_dto(r) for r in rows]
