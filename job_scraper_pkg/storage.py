import logging
from typing import Optional, Sequence

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .config import MONGO_COLLECTION, MONGO_DB, MONGO_TIMEOUT_MS, MONGO_URI
from .errors import PersistenceError
from .models import JobPosting

logger = logging.getLogger(__name__)


class JobStore:
    """Append-only sink for postings backed by a MongoDB collection.

    Every run adds a fresh set of documents; nothing is updated or removed.
    """

    def __init__(
        self,
        uri: str = MONGO_URI,
        database: str = MONGO_DB,
        collection: str = MONGO_COLLECTION,
        client: Optional[MongoClient] = None,
    ):
        self.client = client if client is not None else MongoClient(uri, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
        self.collection = self.client[database][collection]
        self.closed = False

    def insert_jobs(self, jobs: Sequence[JobPosting]) -> int:
        """Bulk-insert the batch with a single `insert_many` call.

        An empty batch performs no write. Driver failures surface as
        `PersistenceError`.
        """
        if not jobs:
            return 0
        docs = [job.to_document() for job in jobs]
        try:
            result = self.collection.insert_many(docs)
        except PyMongoError as e:
            raise PersistenceError(f"Bulk insert failed: {e}") from e
        inserted = len(result.inserted_ids)
        logger.info("Inserted %d job documents into %s", inserted, self.collection.name)
        return inserted

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.client.close()
        logger.info("MongoDB connection closed")
