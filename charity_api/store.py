import structlog
from sqlalchemy.exc import SQLAlchemyError

from charity_api.errors import StorageError
from charity_api.models import Contact, Donation, Subscriber, Volunteer

logger = structlog.get_logger()

RECORD_KINDS = {
    "contact": Contact,
    "volunteer": Volunteer,
    "donation": Donation,
    "subscriber": Subscriber,
}


class RecordStore:
    """Create and update-by-filter over the four record kinds.

    Every call runs in its own session and commits before returning; there is
    no transaction spanning two calls.
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def _model(self, kind: str):
        try:
            return RECORD_KINDS[kind]
        except KeyError:
            raise ValueError(f"Unknown record kind: {kind}")

    def insert(self, kind: str, fields: dict) -> int:
        model = self._model(kind)
        db = self._session_factory()
        try:
            record = model(**fields)
            db.add(record)
            db.commit()
            record_id = record.id
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Record insert failed", kind=kind, error=str(exc))
            raise StorageError(f"insert {kind} failed") from exc
        finally:
            db.close()

        logger.debug("Record inserted", kind=kind, id=record_id)
        return record_id

    def update_where(self, kind: str, filter: dict, patch: dict) -> int:
        model = self._model(kind)
        db = self._session_factory()
        try:
            count = (
                db.query(model)
                .filter_by(**filter)
                .update(patch, synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Record update failed", kind=kind, filter=filter, error=str(exc))
            raise StorageError(f"update {kind} failed") from exc
        finally:
            db.close()

        logger.debug("Records updated", kind=kind, filter=filter, count=count)
        return count
