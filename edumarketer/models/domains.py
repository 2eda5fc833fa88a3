from enum import Enum
from typing import Dict, NamedTuple, Type

from edumarketer.models.common import ResultBlob
from edumarketer.models.content_ideas import ContentIdeas
from edumarketer.models.gmb import GMBOptimizations
from edumarketer.models.local_seo import LocalSEOStrategy
from edumarketer.models.performance_marketing import PerformanceMarketingStrategy


class ContentDomain(str, Enum):
    LOCAL_SEO = "local-seo"
    GMB = "gmb"
    PERFORMANCE_MARKETING = "performance-marketing"
    CONTENT_IDEAS = "content-ideas"


class DomainStorage(NamedTuple):
    table: str
    column: str
    blob: Type[ResultBlob]


DOMAIN_STORAGE: Dict[ContentDomain, DomainStorage] = {
    ContentDomain.LOCAL_SEO: DomainStorage("local_seo_strategies", "strategy_data", LocalSEOStrategy),
    ContentDomain.GMB: DomainStorage("gmb_optimizations", "optimization_data", GMBOptimizations),
    ContentDomain.PERFORMANCE_MARKETING: DomainStorage(
        "performance_marketing_strategies", "strategy_data", PerformanceMarketingStrategy
    ),
    ContentDomain.CONTENT_IDEAS: DomainStorage("content_ideas", "ideas_data", ContentIdeas),
}


def blob_class(domain: ContentDomain) -> Type[ResultBlob]:
    return DOMAIN_STORAGE[domain].blob
