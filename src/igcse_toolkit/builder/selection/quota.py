"""
Module: builder.selection.quota

Purpose:
    Category quota ledger for blueprint-driven selection. The ledger is
    a plain mapping from category to CategoryQuota and is only ever
    replaced, never mutated: allocate() returns a new ledger.

Key Functions:
    - init_quotas(): Fresh ledger from a blueprint
    - allocate(): Pure reducer recording awarded marks
    - is_unmet(): True while a category is below its minimum
    - unmet_categories(): Categories still short, in blueprint order

Dependencies:
    - core.models: CategoryQuota, PaperBlueprint

Used By:
    - builder.selection.selector: Pass 1 (quota satisfaction)
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from igcse_toolkit.core.models import Category, CategoryQuota, PaperBlueprint

QuotaLedger = Mapping[Category, CategoryQuota]


def init_quotas(blueprint: Optional[PaperBlueprint]) -> Dict[Category, CategoryQuota]:
    """
    Build an empty ledger for a blueprint.

    Categories with a zero minimum are left out, they can never be unmet.

    Example:
        >>> ledger = init_quotas(get_blueprint("5"))
        >>> ledger[Category.PRACTICAL_SKILLS]
        CategoryQuota(needed=60, allocated=0)
    """
    if blueprint is None:
        return {}
    return {
        entry.name: CategoryQuota(needed=entry.min_marks)
        for entry in blueprint.categories
        if entry.min_marks > 0
    }


def allocate(ledger: QuotaLedger, category: Category, marks: int) -> Dict[Category, CategoryQuota]:
    """
    Record marks against a category.

    Args:
        ledger: Current ledger (left untouched)
        category: Category the marks were awarded in
        marks: Awarded marks (>= 0)

    Returns:
        New ledger. Categories without a quota are ignored.
    """
    if marks < 0:
        raise ValueError(f"Cannot allocate negative marks: {marks}")
    updated = dict(ledger)
    current = updated.get(category)
    if current is not None and marks:
        updated[category] = CategoryQuota(current.needed, current.allocated + marks)
    return updated


def is_unmet(ledger: QuotaLedger, category: Category) -> bool:
    quota = ledger.get(category)
    return quota is not None and not quota.is_met


def unmet_categories(ledger: QuotaLedger) -> List[Category]:
    return [category for category, quota in ledger.items() if not quota.is_met]
