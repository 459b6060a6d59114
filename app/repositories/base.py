from typing import Generic, TypeVar

from botocore.exceptions import ClientError

from app.repositories.errors import RepoError
from app.utils.log import logger

T = TypeVar("T")


class DynamoRepository(Generic[T]):
    """
    Base class for single-item DynamoDB repositories.

    Wraps botocore ClientError into RepoError so callers only deal with
    the repository error hierarchy.
    """

    def __init__(self, table=None):
        from app.utils import db

        self._table = table or db.get_table()

    def _to_model(self, item: dict) -> T:
        """This should be overridden in subclasses"""
        raise NotImplementedError

    def _safe_get(self, **kwargs) -> dict | None:
        try:
            resp = self._table.get_item(**kwargs)
            return resp.get("Item")
        except ClientError as e:
            logger.exception("DynamoDB get_item failed")
            raise RepoError("Failed to read from database") from e

    def _safe_put(self, item: dict) -> None:
        try:
            self._table.put_item(Item=item)
        except ClientError as e:
            logger.exception("DynamoDB put_item failed")
            raise RepoError("Failed to write to database") from e
