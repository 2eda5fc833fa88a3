import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from supabase import Client, create_client

from edumarketer.config import get_settings
from edumarketer.core.errors import InstitutionNotFoundError
from edumarketer.models.common import Institution, InstitutionCreate, InstitutionUpdate
from edumarketer.models.domains import DOMAIN_STORAGE, ContentDomain

logger = logging.getLogger("supabase_service")

INSTITUTIONS_TABLE = "institutions"


class SupabaseService:
    """
    Institutions and per-domain result blobs in Supabase (one row per institution and domain)
    """

    def __init__(self, client: Optional[Client] = None):
        if client is None:
            settings = get_settings()
            if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
                raise RuntimeError("SUPABASE_URL and SUPABASE_KEY are required")
            client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        self.sb = client

    # ---------- institutions ----------

    async def list_institutions(self) -> List[Institution]:
        try:
            res = (
                self.sb.table(INSTITUTIONS_TABLE)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
            return [Institution.from_row(row) for row in (res.data or [])]
        except Exception:
            logger.exception("list_institutions failed")
            raise

    async def get_institution(self, institution_id: str) -> Institution:
        try:
            res = (
                self.sb.table(INSTITUTIONS_TABLE)
                .select("*")
                .eq("id", institution_id)
                .limit(1)
                .execute()
            )
        except Exception:
            logger.exception(f"get_institution failed for id={institution_id}")
            raise
        if not res.data:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        return Institution.from_row(res.data[0])

    async def create_institution(self, data: InstitutionCreate, user_id: Optional[str] = None) -> Institution:
        try:
            logger.info(f"Inserting institution '{data.name}'")
            res = self.sb.table(INSTITUTIONS_TABLE).insert(data.to_row(user_id)).execute()
            return Institution.from_row(res.data[0])
        except Exception:
            logger.exception("create_institution failed")
            raise

    async def update_institution(self, institution_id: str, data: InstitutionUpdate) -> Institution:
        row = data.to_row()
        if not row:
            return await self.get_institution(institution_id)
        try:
            res = self.sb.table(INSTITUTIONS_TABLE).update(row).eq("id", institution_id).execute()
        except Exception:
            logger.exception(f"update_institution failed for id={institution_id}")
            raise
        if not res.data:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        return Institution.from_row(res.data[0])

    async def delete_institution(self, institution_id: str) -> None:
        try:
            res = self.sb.table(INSTITUTIONS_TABLE).delete().eq("id", institution_id).execute()
        except Exception:
            logger.exception(f"delete_institution failed for id={institution_id}")
            raise
        if not res.data:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        logger.info(f"Deleted institution {institution_id}")

    # ---------- result blobs ----------

    async def get_result(self, domain: ContentDomain, institution_id: str) -> Optional[Dict[str, Any]]:
        storage = DOMAIN_STORAGE[domain]
        try:
            res = (
                self.sb.table(storage.table)
                .select(storage.column)
                .eq("institution_id", institution_id)
                .limit(1)
                .execute()
            )
        except Exception:
            logger.exception(f"get_result failed for {domain.value}, institution={institution_id}")
            raise
        if not res.data:
            return None
        return res.data[0].get(storage.column)

    async def save_result(self, domain: ContentDomain, institution_id: str, data: Dict[str, Any]) -> None:
        """Whole-document upsert keyed by institution_id"""
        storage = DOMAIN_STORAGE[domain]
        try:
            logger.info(f"Upserting {storage.table} for institution={institution_id}")
            self.sb.table(storage.table).upsert(
                {"institution_id": institution_id, storage.column: data},
                on_conflict="institution_id",
            ).execute()
        except Exception:
            logger.exception(f"save_result failed for {domain.value}, institution={institution_id}")
            raise

    async def delete_result(self, domain: ContentDomain, institution_id: str) -> None:
        storage = DOMAIN_STORAGE[domain]
        try:
            self.sb.table(storage.table).delete().eq("institution_id", institution_id).execute()
        except Exception:
            logger.exception(f"delete_result failed for {domain.value}, institution={institution_id}")
            raise


class MemoryStore:
    """
    In-process store with the SupabaseService interface, for local development and tests
    """

    def __init__(self):
        self._institutions: Dict[str, Dict[str, Any]] = {}
        self._results: Dict[Tuple[ContentDomain, str], Dict[str, Any]] = {}

    async def list_institutions(self) -> List[Institution]:
        rows = sorted(self._institutions.values(), key=lambda r: r["created_at"], reverse=True)
        return [Institution.from_row(row) for row in rows]

    async def get_institution(self, institution_id: str) -> Institution:
        row = self._institutions.get(institution_id)
        if row is None:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        return Institution.from_row(row)

    async def create_institution(self, data: InstitutionCreate, user_id: Optional[str] = None) -> Institution:
        now = datetime.now(timezone.utc).isoformat()
        row = {**data.to_row(user_id), "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        self._institutions[row["id"]] = row
        return Institution.from_row(row)

    async def update_institution(self, institution_id: str, data: InstitutionUpdate) -> Institution:
        row = self._institutions.get(institution_id)
        if row is None:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        row.update(data.to_row())
        row["updated_at"] = datetime.now(timezone.utc).isoformat()
        return Institution.from_row(row)

    async def delete_institution(self, institution_id: str) -> None:
        if self._institutions.pop(institution_id, None) is None:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        for key in [k for k in self._results if k[1] == institution_id]:
            del self._results[key]

    async def get_result(self, domain: ContentDomain, institution_id: str) -> Optional[Dict[str, Any]]:
        data = self._results.get((domain, institution_id))
        return copy.deepcopy(data) if data is not None else None

    async def save_result(self, domain: ContentDomain, institution_id: str, data: Dict[str, Any]) -> None:
        if institution_id not in self._institutions:
            raise InstitutionNotFoundError(f"Institution '{institution_id}' not found")
        self._results[(domain, institution_id)] = copy.deepcopy(data)

    async def delete_result(self, domain: ContentDomain, institution_id: str) -> None:
        self._results.pop((domain, institution_id), None)


_store = None


def get_store():
    """
    Get the configured store singleton (Supabase unless STORE_BACKEND=memory)
    """
    global _store

    if _store is None:
        backend = get_settings().STORE_BACKEND
        logger.info(f"Initializing {backend} store")
        _store = MemoryStore() if backend == "memory" else SupabaseService()
    return _store
