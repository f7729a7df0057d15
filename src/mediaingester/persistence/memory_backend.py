"""In-memory backends for unit tests and local runs, dict-backed."""

from __future__ import annotations

from typing import Optional

from mediaingester.core.exceptions import ConfigurationError, StorageError
from mediaingester.core.types import TagSet
from mediaingester.models.state import MediaState


class MemoryJobStateStore:
    """Dict-backed IJobStateStore; stores the serialized form like the real table."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def put(self, job_id: str, state: MediaState) -> None:
        self._items[job_id] = state.to_json()

    def get(self, job_id: str) -> Optional[MediaState]:
        raw = self._items.get(job_id)
        return MediaState.from_json(raw) if raw is not None else None

    def delete(self, job_id: str) -> None:
        self._items.pop(job_id, None)

    def __contains__(self, job_id: str) -> bool:
        return job_id in self._items

    def __len__(self) -> int:
        return len(self._items)


class MemoryObjectStore:
    """Dict-backed IObjectStore keyed by (bucket, key)."""

    def __init__(self, region: str = "us-east-1") -> None:
        self._region = region
        self.objects: dict[tuple[str, str], bytes] = {}
        self.tags: dict[tuple[str, str], TagSet] = {}

    def get(self, bucket: str, key: str) -> bytes:
        try:
            return self.objects[(bucket, key)]
        except KeyError:
            raise StorageError(f"No such object {bucket}::/{key}") from None

    def put(self, bucket: str, key: str, data: bytes,
            tags: Optional[TagSet] = None) -> None:
        self.objects[(bucket, key)] = data
        self.tags[(bucket, key)] = dict(tags or {})

    def copy(self, src_bucket: str, src_key: str, dst_bucket: str, dst_key: str,
             tags: Optional[TagSet] = None) -> None:
        data = self.get(src_bucket, src_key)
        self.objects[(dst_bucket, dst_key)] = data
        if tags is None:
            tags = self.tags.get((src_bucket, src_key), {})
        self.tags[(dst_bucket, dst_key)] = dict(tags)

    def delete(self, bucket: str, key: str) -> None:
        self.objects.pop((bucket, key), None)
        self.tags.pop((bucket, key), None)

    def locate(self, bucket: str) -> str:
        return self._region

    def keys(self, bucket: str) -> list[str]:
        return sorted(key for b, key in self.objects if b == bucket)


class MemoryCacheBackend:
    """Dict-backed ICacheBackend for unit tests."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)


class MemoryParameterSource:
    """Dict-backed IParameterSource."""

    def __init__(self, values: Optional[dict[str, str]] = None) -> None:
        self._values = dict(values or {})

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def remove(self, name: str) -> None:
        self._values.pop(name, None)

    def get_parameter(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise ConfigurationError(name, "parameter not found") from None


class MemoryNotifier:
    """Records published notifications instead of sending them."""

    def __init__(self) -> None:
        self.published: list[dict[str, str]] = []

    def publish(self, topic_arn: str, subject: str, message: str) -> str:
        self.published.append({"topic_arn": topic_arn, "subject": subject, "message": message})
        return f"msg-{len(self.published)}"
