"""Book Collection Repository - Data Access Layer"""
import logging
from typing import Any, Dict, List, NamedTuple, Optional
from pymongo.collection import Collection
from pymongo.errors import BulkWriteError, DuplicateKeyError, PyMongoError
from booktoggle.exceptions.exceptions import StoreError

logger = logging.getLogger(__name__)

DUPLICATE_KEY_CODE = 11000

class InsertOutcome(NamedTuple):
    inserted_count: int
    inserted_ids: List[Any]
    duplicate_error: Optional[str] = None

class BookCollectionRepo:
    """Count / bulk insert / bulk delete against the single managed collection"""

    def __init__(self, collection: Collection):
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.name

    def ping(self):
        """Verify the server is reachable"""
        try:
            self.collection.database.client.admin.command("ping")
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    def count(self) -> int:
        """Current number of documents"""
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    def insert_many(self, records: List[Dict]) -> InsertOutcome:
        """Unordered bulk insert; duplicate keys are reported, not raised"""
        try:
            result = self.collection.insert_many(records, ordered=False)
            return InsertOutcome(len(result.inserted_ids), list(result.inserted_ids))

        except BulkWriteError as e:
            details = e.details or {}
            write_errors = details.get("writeErrors", [])
            if not write_errors or any(err.get("code") != DUPLICATE_KEY_CODE for err in write_errors):
                raise StoreError(str(e)) from e

            # insert_many assigns _id to every record before sending the batch
            failed = {err.get("index") for err in write_errors}
            inserted_ids = [record.get("_id") for index, record in enumerate(records) if index not in failed]
            inserted_count = details.get("nInserted", len(inserted_ids))
            logger.warning(
                f"{len(write_errors)} duplicate key error(s) inserting into {self.name}; "
                f"{inserted_count} inserted"
            )
            return InsertOutcome(inserted_count, inserted_ids, str(e))

        except DuplicateKeyError as e:
            logger.warning(f"Duplicate key inserting into {self.name}: {e}")
            return InsertOutcome(0, [], str(e))

        except PyMongoError as e:
            raise StoreError(str(e)) from e

    def delete_all(self) -> int:
        """Remove every document, return how many were deleted"""
        try:
            return self.collection.delete_many({}).deleted_count
        except PyMongoError as e:
            raise StoreError(str(e)) from e
