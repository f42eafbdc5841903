"""Categories REST collaborator."""

from typing import List, Optional

from contactsync.errors import DecodeError
from contactsync.models import Category
from contactsync.services.http_client import HttpClient


class CategoriesService:
    def __init__(self, client: Optional[HttpClient] = None):
        self._client = client or HttpClient()

    def list_categories(self) -> List[Category]:
        body = self._client.get("/categories")
        if not isinstance(body, list):
            raise DecodeError(f"Expected a list of categories, got {type(body).__name__}")
        return [Category.from_dict(item) for item in body]
