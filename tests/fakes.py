"""
In-memory stand-ins for the handful of Motor calls the service makes.
Supports equality filters and `$nin`, `$set` updates, upserts and fault injection.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set

from bson import ObjectId
from pymongo.errors import InvalidName, OperationFailure


@dataclass
class FakeUpdateResult:
    matched_count: int
    modified_count: int
    upserted_id: Any = None


@dataclass
class FakeDeleteResult:
    deleted_count: int


def _matches(doc: Dict[str, Any], filt: Dict[str, Any]) -> bool:
    for key, cond in filt.items():
        value = doc.get(key)
        if isinstance(cond, dict) and "$nin" in cond:
            if value in cond["$nin"]:
                return False
        elif value != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: List[Dict[str, Any]]) -> None:
        self._docs = docs

    def __aiter__(self):
        self._it = iter(self._docs)
        return self

    async def __anext__(self):
        try:
            return next(self._it)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    def __init__(self, name: str) -> None:
        self.name = name
        self.docs: List[Dict[str, Any]] = []
        self.fail_on: Set[str] = set()
        self.calls: List[str] = []

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if op in self.fail_on:
            raise OperationFailure(f"injected failure on {self.name}.{op}")

    def _find(self, filt: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [d for d in self.docs if _matches(d, filt)]

    async def create_index(self, *args, **kwargs) -> str:
        return kwargs.get("name", "ix")

    def find(self, filt: Optional[Dict[str, Any]] = None, projection: Optional[Dict[str, Any]] = None) -> FakeCursor:
        self._check("find")
        return FakeCursor([copy.deepcopy(d) for d in self._find(filt or {})])

    async def find_one(self, filt: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check("find_one")
        found = self._find(filt)
        return copy.deepcopy(found[0]) if found else None

    async def count_documents(self, filt: Dict[str, Any]) -> int:
        self._check("count_documents")
        return len(self._find(filt))

    async def insert_one(self, doc: Dict[str, Any]) -> None:
        self._check("insert_one")
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)

    async def replace_one(self, filt: Dict[str, Any], doc: Dict[str, Any], upsert: bool = False) -> FakeUpdateResult:
        self._check("replace_one")
        found = self._find(filt)
        if found:
            idx = self.docs.index(found[0])
            modified = int(self.docs[idx] != doc)
            self.docs[idx] = copy.deepcopy(doc)
            return FakeUpdateResult(matched_count=1, modified_count=modified)
        if upsert:
            self.docs.append(copy.deepcopy(doc))
            return FakeUpdateResult(matched_count=0, modified_count=0, upserted_id=doc.get("_id"))
        return FakeUpdateResult(matched_count=0, modified_count=0)

    async def update_one(self, filt: Dict[str, Any], update: Dict[str, Any], upsert: bool = False) -> FakeUpdateResult:
        self._check("update_one")
        found = self._find(filt)
        if found:
            found[0].update(copy.deepcopy(update.get("$set", {})))
            return FakeUpdateResult(matched_count=1, modified_count=1)
        if upsert:
            doc = {"_id": ObjectId(), **copy.deepcopy(filt), **copy.deepcopy(update.get("$set", {}))}
            self.docs.append(doc)
            return FakeUpdateResult(matched_count=0, modified_count=0, upserted_id=doc["_id"])
        return FakeUpdateResult(matched_count=0, modified_count=0)

    async def find_one_and_update(self, filt: Dict[str, Any], update: Dict[str, Any], **kwargs) -> Optional[Dict[str, Any]]:
        self._check("find_one_and_update")
        found = self._find(filt)
        if not found:
            return None
        found[0].update(copy.deepcopy(update.get("$set", {})))
        return copy.deepcopy(found[0])

    async def delete_many(self, filt: Dict[str, Any]) -> FakeDeleteResult:
        self._check("delete_many")
        doomed = self._find(filt)
        self.docs = [d for d in self.docs if d not in doomed]
        return FakeDeleteResult(deleted_count=len(doomed))

    def ids(self) -> Set[ObjectId]:
        return {d["_id"] for d in self.docs}


_INVALID_DB_CHARS = (" ", ".", "$", "/", "\\", "\x00", "\"")


class FakeDatabase:
    def __init__(self, name: str) -> None:
        self.name = name
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]


class FakeClient:
    def __init__(self) -> None:
        self._dbs: Dict[str, FakeDatabase] = {}

    def __getitem__(self, name: str) -> FakeDatabase:
        # same character rules pymongo applies when a database handle is created
        if not name or any(ch in name for ch in _INVALID_DB_CHARS):
            raise InvalidName(f"database name {name!r} is invalid")
        if name not in self._dbs:
            self._dbs[name] = FakeDatabase(name)
        return self._dbs[name]

    def tenant_db(self, name: str) -> FakeDatabase:
        return self[name]
