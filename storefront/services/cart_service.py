from typing import List, Optional, Tuple
from ..config import AppConfig, ConfigurationError
from ..db.session import make_session_factory
from ..models.cart_item import CartItem
from ..utils.dto import CartItemDTO, to_cart_item_dto
from .logging import log_event, set_log_level


class CartService:
    """Cart persistence backed by the CartItems table.

    Carts are owned by the user id when one is given, otherwise by the
    session id; both are stored in the same ``UserId`` column.
    """

    def __init__(self, connection_string: Optional[str], session_factory=None):
        connection_string = (connection_string or "").strip()
        if not connection_string:
            raise ConfigurationError("DefaultConnection string is missing.")
        self._session_factory = session_factory or make_session_factory(connection_string)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "CartService":
        set_log_level(cfg.log_level)
        return cls(cfg.database_url)

    @staticmethod
    def _identity(session_id: Optional[str], user_id: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
        return session_id or None, user_id or None

    @classmethod
    def _owner(cls, session_id: Optional[str], user_id: Optional[str]) -> Optional[str]:
        sid, uid = cls._identity(session_id, user_id)
        return uid if uid else sid

    def get_cart(self, session_id: Optional[str], user_id: Optional[str]) -> List[CartItemDTO]:
        owner = self._owner(session_id, user_id)
        if owner is None:
            return []
        with self._session_factory() as session:
            rows = session.query(CartItem).filter(CartItem.user_id == owner).all()
            return [to_cart_item_dto(r) for r in rows]

    def save_cart(self, session_id: Optional[str], user_id: Optional[str], items: List[CartItemDTO]) -> None:
        """Insert new items and update quantities of existing ones.

        New items (``id == 0``) get the generated id written back. For
        existing ids only ``Quantity`` changes; the row's owner is not
        checked. The whole call commits or rolls back as one unit.
        """
        owner = self._owner(session_id, user_id)
        inserted = updated = 0
        with self._session_factory() as session:
            for item in items:
                if item.is_new:
                    row = CartItem(
                        user_id=owner,
                        product_id=item.product_id,
                        product_name=item.product_name,
                        price=item.price,
                        quantity=item.quantity,
                        added_at=item.added_at,
                    )
                    session.add(row)
                    session.flush()
                    item.id = row.id
                    inserted += 1
                else:
                    session.query(CartItem).filter(CartItem.id == item.id).update(
                        {CartItem.quantity: item.quantity}, synchronize_session=False
                    )
                    updated += 1
        log_event("info", "cart.saved", owner=owner, inserted=inserted, updated=updated)

    def clear_cart(self, session_id: Optional[str], user_id: Optional[str]) -> None:
        owner = self._owner(session_id, user_id)
        if owner is None:
            return None
        with self._session_factory() as session:
            deleted = (
                session.query(CartItem)
                .filter(CartItem.user_id == owner)
                .delete(synchronize_session=False)
            )
        log_event("info", "cart.cleared", owner=owner, deleted=deleted)
