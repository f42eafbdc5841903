"""
Client-side search over already-fetched records.

Filtering never touches the source sequence; every call recomputes the
result from the items it is given.
"""

from typing import Callable, Generic, Sequence, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')


class SearchService(Generic[T]):
    """
    Case-insensitive substring search with a minimum character trigger.

    Key features:
    - Customizable searchable text extraction
    - Terms shorter than min_chars match everything
    - Original ordering preserved
    """

    # Class constant for minimum search characters
    MIN_SEARCH_CHARS = 0

    def __init__(self,
                 searchable_text_extractor: Callable[[T], str],
                 min_chars: int = MIN_SEARCH_CHARS):
        """
        Initialize search service.

        Args:
            searchable_text_extractor: Function to extract searchable text from an item
            min_chars: Minimum characters required to trigger search
        """
        self.searchable_text_extractor = searchable_text_extractor
        self.min_chars = min_chars

    def filter(self, items: Sequence[T], search_term: str) -> Tuple[T, ...]:
        """
        Return the items whose searchable text contains search_term.

        Args:
            items: Items to search (not modified)
            search_term: Search string to filter by

        Returns:
            Tuple of matching items in their original order
        """
        if not search_term or len(search_term) < self.min_chars:
            return tuple(items)

        search_lower = search_term.lower()
        return tuple(
            item for item in items
            if search_lower in self.searchable_text_extractor(item).lower()
        )
