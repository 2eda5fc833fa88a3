import logging
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel

from edumarketer.models.common import StatusItem

logger = logging.getLogger("merge")

ItemT = TypeVar("ItemT", bound=StatusItem)
NewEntry = Union[BaseModel, Dict[str, Any], str]


def new_item_id() -> str:
    return str(uuid.uuid4())


def _entry_fields(entry: NewEntry) -> Dict[str, Any]:
    """Field values of a new entry, keyed by attribute name"""
    if isinstance(entry, str):
        return {"text": entry}
    if isinstance(entry, BaseModel):
        return entry.model_dump(exclude={"id", "status"})
    return {k: v for k, v in entry.items() if k not in ("id", "status")}


def to_status_items(
    new_items: Iterable[NewEntry],
    item_cls: Type[ItemT],
    id_factory: Callable[[], str] = new_item_id,
) -> List[ItemT]:
    """
    First-generation mapping: every entry gets a fresh id and status pending.
    """
    return [
        item_cls(**{**_entry_fields(entry), "id": id_factory(), "status": "pending"})
        for entry in new_items
    ]


def merge_status_items(
    existing: Optional[Sequence[ItemT]],
    new_items: Optional[Sequence[NewEntry]],
    item_cls: Type[ItemT],
    carry: Sequence[str] = (),
    id_factory: Callable[[], str] = new_item_id,
) -> List[ItemT]:
    """
    Reconcile a previous list of status items with a freshly generated list.

    Each new entry is matched against the existing items by case-insensitive
    text. A match keeps the existing id and status; every other field comes
    from the new entry, except the ``carry`` fields, which fall back to the
    matched item's values when the new entry leaves them unset. Unmatched
    entries get a fresh id and status ``pending``.

    The new list is authoritative: output order and membership follow
    ``new_items``, and existing items it does not mention are dropped.
    When ``new_items`` is None the upstream generation produced nothing and
    ``existing`` is returned unchanged.
    """
    existing_list = list(existing or [])
    if new_items is None:
        logger.warning("No new items produced, keeping %d existing items", len(existing_list))
        return existing_list

    claimed = set()
    merged: List[ItemT] = []
    matched_count = 0

    for entry in new_items:
        fields = _entry_fields(entry)
        key = str(fields.get("text", "")).lower()

        match_index = None
        for index, item in enumerate(existing_list):
            if index in claimed:
                continue
            if item.text.lower() == key:
                match_index = index
                break

        if match_index is None:
            merged.append(item_cls(**{**fields, "id": id_factory(), "status": "pending"}))
            continue

        claimed.add(match_index)
        matched_count += 1
        match = existing_list[match_index]
        for name in carry:
            if fields.get(name) is None:
                fields[name] = getattr(match, name, None)
        merged.append(item_cls(**{**fields, "id": match.id, "status": match.status}))

    logger.info(
        "Merged items: %d kept, %d new, %d dropped",
        matched_count,
        len(merged) - matched_count,
        len(existing_list) - matched_count,
    )
    return merged
