"""Cache keys for public exhibition responses.

Every key embeds a generation token. Invalidation rotates the token, which
orphans all public entries at once; they expire on their own TTL.
"""

import hashlib
import uuid

from django.conf import settings
from django.core.cache import cache

GENERATION_KEY = "exhibitions:public:generation"


def _generation() -> str:
    return cache.get_or_set(GENERATION_KEY, lambda: uuid.uuid4().hex, timeout=None)


def public_list_key(
    category: str | None, search: str | None, page: int, per_page: int
) -> str:
    raw = f"{category or ''}|{search or ''}|{page}|{per_page}"
    digest = hashlib.sha256(raw.encode("utf-8")).hexdigest()[:32]
    return f"exhibitions:public:{_generation()}:list:{digest}"


def public_detail_key(exhibition_id: str) -> str:
    return f"exhibitions:public:{_generation()}:detail:{exhibition_id}"


def category_counts_key() -> str:
    return f"exhibitions:public:{_generation()}:categories"


def cache_ttl() -> int:
    return settings.PUBLIC_CACHE_TTL


def invalidate_public_cache() -> None:
    cache.set(GENERATION_KEY, uuid.uuid4().hex, timeout=None)
