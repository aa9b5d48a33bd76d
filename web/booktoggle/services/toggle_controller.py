"""Toggle Controller - Business Logic Layer

The collection is ON when it holds at least one document and OFF when it is
empty. The state is recomputed from the live count on every call and never
stored.

Known limitation: the count check and the following insert/delete are two
separate store calls. Two concurrent activations can both observe an empty
collection and both insert; seed records carrying fixed ``_id`` values make
the second insert collide, which is reported as a duplicate-key soft success.
"""
import enum
import os
import logging
from booktoggle.exceptions.exceptions import AlreadyActiveError, AlreadyInactiveError, InvalidSeedError
from booktoggle.repositories.collection_repo import BookCollectionRepo
from booktoggle.repositories.seed_repo import SeedFileSource
from booktoggle.utils.formatting.json_utils import normalize_records, sanitize_mongo_document

logger = logging.getLogger(__name__)

class ToggleState(str, enum.Enum):
    OFF = "OFF"
    ON = "ON"

class ToggleController:
    def __init__(self, collection_repo: BookCollectionRepo, seed_source: SeedFileSource):
        self.collection_repo = collection_repo
        self.seed_source = seed_source

    def state(self) -> ToggleState:
        """Derived on/off state"""
        return ToggleState.ON if self.collection_repo.count() > 0 else ToggleState.OFF

    def status(self) -> dict:
        return {"count": self.collection_repo.count()}

    def activate(self) -> dict:
        """OFF -> ON: bulk-load the seed dataset"""
        state = self.state()
        if state is ToggleState.ON:
            logger.info(f"Refusing activate: {self.collection_repo.name} is already {state.value}")
            raise AlreadyActiveError("Collection already has documents. Please turn off (delete) first.")

        records = self._load_seed()
        outcome = self.collection_repo.insert_many(normalize_records(records))

        if outcome.duplicate_error:
            logger.warning(f"Activate finished with duplicate keys: {outcome.inserted_count} inserted")
            return sanitize_mongo_document({
                "message": "Some documents already existed (duplicate keys)",
                "insertedCount": outcome.inserted_count,
                "insertedIds": outcome.inserted_ids,
                "error": outcome.duplicate_error,
            })

        logger.info(
            f"{self.collection_repo.name} {state.value} -> {ToggleState.ON.value}: "
            f"{outcome.inserted_count} documents inserted"
        )
        return sanitize_mongo_document({
            "message": "Inserted successfully",
            "insertedCount": outcome.inserted_count,
            "insertedIds": outcome.inserted_ids,
        })

    def deactivate(self) -> dict:
        """ON -> OFF: delete every document"""
        state = self.state()
        if state is ToggleState.OFF:
            logger.info(f"Refusing deactivate: {self.collection_repo.name} is already {state.value}")
            raise AlreadyInactiveError("Collection is empty. Nothing to delete.")

        deleted = self.collection_repo.delete_all()
        logger.info(f"{self.collection_repo.name} {state.value} -> {ToggleState.OFF.value}: {deleted} documents deleted")
        return {"message": "All documents deleted", "deletedCount": deleted}

    def _load_seed(self) -> list:
        seed_name = os.path.basename(self.seed_source.path)
        records = self.seed_source.read()
        if not isinstance(records, list):
            raise InvalidSeedError(f"{seed_name} must be an array")
        if not records:
            raise InvalidSeedError(f"{seed_name} contains no records")
        if not all(isinstance(record, dict) for record in records):
            raise InvalidSeedError(f"{seed_name} must contain only objects")
        return records
