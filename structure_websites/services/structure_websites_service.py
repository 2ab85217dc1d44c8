# structure_websites/services/structure_websites_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from structure_websites.core.identity import ID_FIELD, parse_object_id
from structure_websites.core.merge import merge_payload
from structure_websites.dal.structure_websites_dal import StructureWebsitesDAL
from structure_websites.errors import GuardViolationError, InputValidationError, StorageError

logger = logging.getLogger("structure_websites.services.structure_websites")


class StructureWebsitesService:
    def __init__(self, db: AsyncIOMotorDatabase, *, local_development: bool = False) -> None:
        self.dal = StructureWebsitesDAL(db)
        self.local_development = local_development

    async def list_documents(self) -> List[Dict[str, Any]]:
        try:
            docs = await self.dal.list_all()
        except PyMongoError as e:
            logger.exception("[structure_websites] failed to query structure_websites collection")
            raise StorageError(f"failed to load structure_websites: {e}", operation="list_documents", cause=e) from e
        logger.info("[structure_websites] loaded %d document(s) from structure_websites", len(docs))
        return docs

    async def replace_document(self, doc_id: str, payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Merge `payload` into the stored document and write the result back as a full replace.
        Only available in local development.
        """
        op = "replace_document"
        if not self.local_development:
            raise GuardViolationError(
                "structure_websites mutation is available only when LOCAL_DEVELOPMENT=true", operation=op
            )
        if not (doc_id or "").strip():
            raise InputValidationError("id is required", operation=op)
        if not payload:
            raise InputValidationError("payload cannot be empty", operation=op)

        oid = parse_object_id(doc_id.strip(), operation=op)

        try:
            existing = await self.dal.get(oid)
            doc = merge_payload(existing or {ID_FIELD: oid}, payload)
            doc[ID_FIELD] = oid
            res = await self.dal.replace(doc)
        except PyMongoError as e:
            logger.exception("[structure_websites] failed to replace document %s", doc_id)
            raise StorageError(f"failed to replace document {doc_id}: {e}", operation=op, cause=e) from e

        logger.info(
            "[structure_websites] updated document %s (matched: %d, modified: %d, upserted_id: %s)",
            doc_id,
            res.matched_count,
            res.modified_count,
            res.upserted_id,
        )
        return doc
