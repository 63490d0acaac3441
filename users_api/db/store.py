from typing import Dict, List, Optional, Protocol
from botocore.exceptions import BotoCoreError, ClientError
import logging

logger = logging.getLogger(__name__)


class StoreUnavailable(Exception):
    """The table could not be reached or rejected the request."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class RecordStore(Protocol):
    def get_item(self, key: Dict) -> Optional[Dict]: ...

    def scan(self) -> List[Dict]: ...

    def put_item(self, item: Dict) -> None: ...

    def delete_item(self, key: Dict) -> None: ...


class DynamoRecordStore:
    """RecordStore backed by a boto3 DynamoDB Table resource."""

    def __init__(self, table):
        self.table = table

    def get_item(self, key: Dict) -> Optional[Dict]:
        try:
            response = self.table.get_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error getting item from {self.table.name}: {str(e)}")
            raise StoreUnavailable("GetItem", e) from e
        return response.get('Item')

    def scan(self) -> List[Dict]:
        # Single page only; LastEvaluatedKey is not followed
        try:
            response = self.table.scan()
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error scanning {self.table.name}: {str(e)}")
            raise StoreUnavailable("Scan", e) from e
        return response.get('Items', [])

    def put_item(self, item: Dict) -> None:
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error putting item into {self.table.name}: {str(e)}")
            raise StoreUnavailable("PutItem", e) from e

    def delete_item(self, key: Dict) -> None:
        try:
            self.table.delete_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error deleting item from {self.table.name}: {str(e)}")
            raise StoreUnavailable("DeleteItem", e) from e
