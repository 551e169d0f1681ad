# server/core/categories.py

import logging
from sqlalchemy.orm import Session

from core.config import Config
from core.errors import NotFoundError, ValidationError
from models.category import Category


logger = logging.getLogger(__name__)

# Marker for "parent not supplied", distinct from an explicit None (make root).
UNSET = object()


def create_category(db: Session, name: str | None, parent: str | None = None) -> Category:
    if not name or not name.strip():
        raise ValidationError("Category name is required")

    category = Category(name=name, parent=parent or None)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Category %s created (parent=%s)", category.id, category.parent)
    return category


def get_category(db: Session, category_id: str) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise NotFoundError("Category not found")
    return category


def resolve_ancestors(arena: dict[str, Category], parent_id: str | None, depth: int):
    """
    Expands `parent_id` into its category record, then that record's parent,
    and so on for `depth` levels.

    Past the last level the parent is left as a bare id. A parent id missing
    from `arena` (deleted category) resolves to None. Since the walk is bounded
    by `depth`, a cycle in the stored data cannot make it loop forever.
    """
    if parent_id is None:
        return None
    if depth <= 0:
        return parent_id

    parent = arena.get(parent_id)
    if parent is None:
        return None

    return {
        "id": parent.id,
        "name": parent.name,
        "parent": resolve_ancestors(arena, parent.parent, depth - 1),
    }


def list_categories(db: Session, depth: int | None = None) -> list[dict]:
    """
    Returns every category with its ancestor chain expanded.
    The default depth (3) covers trees of up to four levels.
    """
    if depth is None:
        depth = Config.CATEGORY_POPULATE_DEPTH

    categories = db.query(Category).all()
    arena = {c.id: c for c in categories}

    return [
        {
            "id": c.id,
            "name": c.name,
            "parent": resolve_ancestors(arena, c.parent, depth),
        }
        for c in categories
    ]


def _is_descendant(db: Session, category_id: str, candidate_id: str) -> bool:
    # walk up from the candidate; seen guards against cycles already in the data
    seen = set()
    current_id = candidate_id
    while current_id and current_id not in seen:
        if current_id == category_id:
            return True
        seen.add(current_id)
        current = db.get(Category, current_id)
        current_id = current.parent if current else None
    return False


def update_category(db: Session, category_id: str, name: str | None, parent=UNSET) -> Category:
    category = get_category(db, category_id)

    if not name or not name.strip():
        raise ValidationError("Category name is required")

    if parent is not UNSET:
        parent = parent or None
        if parent is not None and _is_descendant(db, category_id, parent):
            raise ValidationError("A category cannot be its own ancestor")
        category.parent = parent

    category.name = name
    db.commit()
    db.refresh(category)
    logger.info("Category %s updated", category.id)
    return category


def delete_category(db: Session, category_id: str) -> None:
    category = get_category(db, category_id)
    db.delete(category)
    db.commit()
    logger.info("Category %s deleted", category_id)
