from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Status = Literal["pending", "inProgress", "done", "rejected"]

STATUS_OPTIONS: List[Tuple[str, str]] = [
    ("pending", "Pending"),
    ("inProgress", "In Progress"),
    ("done", "Done"),
    ("rejected", "Rejected"),
]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys, as persisted and returned by the API"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------- Status-bearing items ----------

class StatusItem(CamelModel):
    """Text entry carrying a workflow status"""
    id: str = Field(..., description="Unique identifier for the item.")
    text: str = Field(..., description="The text content of the item.")
    status: Status = Field(default="pending", description="The status of the item.")


class KeywordItem(StatusItem):
    """Keyword or KPI with optional search volume estimates"""
    search_volume_last24h: Optional[str] = Field(
        default=None,
        alias="searchVolumeLast24h",
        description='Estimated search volume in the last 24 hours (e.g., "approx 50 searches", "low").'
    )
    search_volume_last7d: Optional[str] = Field(
        default=None,
        alias="searchVolumeLast7d",
        description='Estimated search volume in the last 7 days (e.g., "approx 350 searches", "medium").'
    )


# ---------- AI-side items (no id / status) ----------

class AIKeyword(CamelModel):
    text: str = Field(..., description="The keyword text.")
    search_volume_last24h: Optional[str] = Field(
        default=None,
        alias="searchVolumeLast24h",
        description='Estimated search volume in the last 24 hours for the given location. (e.g., "approx 50 searches", "low", "data unavailable")'
    )
    search_volume_last7d: Optional[str] = Field(
        default=None,
        alias="searchVolumeLast7d",
        description='Estimated search volume in the last 7 days for the given location. (e.g., "approx 350 searches", "medium", "data unavailable")'
    )


class AIKpi(CamelModel):
    text: str = Field(..., description="The KPI description.")


# ---------- Institution ----------

class InstitutionBase(CamelModel):
    name: str = Field(..., min_length=1, description="Name of the institution")
    type: str = Field(..., min_length=1, description="e.g., University, K-12 School, Online Bootcamp")
    location: str = Field(..., min_length=1, description="e.g., City, State")
    programs_offered: str = Field(..., min_length=1)
    target_audience: str = Field(..., min_length=1)
    unique_selling_points: str = Field(..., min_length=1)
    website_url: Optional[str] = None


class Institution(InstitutionBase):
    id: str

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Institution":
        """Map an institutions table row to the API shape"""
        return cls(
            id=str(row["id"]),
            name=row["name"],
            type=row["type"],
            location=row["location"],
            programs_offered=row["programs_offered"],
            target_audience=row["target_audience"],
            unique_selling_points=row["unique_selling_points"],
            website_url=row.get("website_url") or None,
        )


class InstitutionCreate(InstitutionBase):

    def to_row(self, user_id: Optional[str] = None) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "location": self.location,
            "programs_offered": self.programs_offered,
            "target_audience": self.target_audience,
            "unique_selling_points": self.unique_selling_points,
            "website_url": self.website_url,
            "user_id": user_id,
        }


class InstitutionUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    programs_offered: Optional[str] = Field(default=None, min_length=1)
    target_audience: Optional[str] = Field(default=None, min_length=1)
    unique_selling_points: Optional[str] = Field(default=None, min_length=1)
    website_url: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent"""
        return self.model_dump(exclude_unset=True)


# ---------- Blob base ----------

class ResultBlob(CamelModel):
    """Structured output of one generation call for one content domain"""

    def status_lists(self) -> List[List[StatusItem]]:
        """Every list of status-bearing items in the blob"""
        return []

    def section_status_fields(self) -> Dict[str, str]:
        """Section key -> attribute holding that section's status"""
        return {}
