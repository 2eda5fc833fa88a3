import logging
from typing import TypeVar

from edumarketer.core.errors import ItemNotFoundError, SectionNotFoundError
from edumarketer.models.common import ResultBlob, Status, StatusItem

logger = logging.getLogger("status")

BlobT = TypeVar("BlobT", bound=ResultBlob)


def find_item(blob: ResultBlob, item_id: str) -> StatusItem:
    for items in blob.status_lists():
        for item in items:
            if item.id == item_id:
                return item
    raise ItemNotFoundError(f"Item '{item_id}' not found")


def set_item_status(blob: BlobT, item_id: str, status: Status) -> BlobT:
    """Change the status of one item in place and return the blob"""
    item = find_item(blob, item_id)
    logger.info(f"Item {item_id}: {item.status} -> {status}")
    item.status = status
    return blob


def set_section_status(blob: BlobT, section: str, status: Status) -> BlobT:
    fields = blob.section_status_fields()
    if section not in fields:
        raise SectionNotFoundError(
            f"Unknown section '{section}' (available: {', '.join(fields) or 'none'})"
        )
    logger.info(f"Section {section}: -> {status}")
    setattr(blob, fields[section], status)
    return blob
