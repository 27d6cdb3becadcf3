"""
Record Store - one MongoDB collection behind a document schema.

Each method issues exactly one collection call. Schema violations surface as
pydantic.ValidationError, malformed ids as bson.errors.InvalidId and driver
failures as pymongo.errors.PyMongoError; callers decide how to report them.
"""
from typing import Any, Dict, List, Optional, Type

from bson import ObjectId
from pydantic import BaseModel
from pymongo import ReturnDocument
import structlog

logger = structlog.get_logger()


def to_record(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a stored document to its API shape (``_id`` becomes ``id``)"""
    record = {key: value for key, value in document.items() if key != "_id"}
    return {"id": str(document["_id"]), **record}


class RecordStore:
    """
    CRUD over a single record collection.

    ``document_model`` is checked on insert (required fields and casting),
    ``patch_model`` casts the replaceable fields on update.
    """

    def __init__(
        self,
        collection,
        document_model: Type[BaseModel],
        patch_model: Type[BaseModel],
    ):
        self.collection = collection
        self.document_model = document_model
        self.patch_model = patch_model

    @property
    def name(self) -> str:
        return self.collection.name

    async def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new record built from ``fields``"""
        document = self.document_model.model_validate(fields).model_dump(exclude_unset=True)
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info("Record created", collection=self.name, record_id=str(result.inserted_id))
        return to_record(document)

    async def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """All records of one user, in store order"""
        documents = await self.collection.find({"userId": user_id}).to_list(length=None)
        return [to_record(document) for document in documents]

    async def replace_fields(self, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Overwrite every replaceable field of a record.

        Fields absent from ``fields`` are written as null. Returns the record
        after the update, or None when no record has this id.
        """
        update = self.patch_model.model_validate(fields).model_dump()
        document = await self.collection.find_one_and_update(
            {"_id": ObjectId(record_id)},
            {"$set": update},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            return None

        logger.info("Record updated", collection=self.name, record_id=record_id)
        return to_record(document)

    async def delete(self, record_id: str) -> None:
        """Remove a record; deleting an unknown id is not an error"""
        result = await self.collection.delete_one({"_id": ObjectId(record_id)})
        if result.deleted_count:
            logger.info("Record deleted", collection=self.name, record_id=record_id)
        else:
            logger.debug("No record to delete", collection=self.name, record_id=record_id)
