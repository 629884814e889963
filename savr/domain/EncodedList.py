"""Base aggregate over a list of encoded rows stored in a profile field."""
from typing import Iterable, List, Optional

from savr.utilities.exceptions import ItemNotFoundError, StaleIndexError


class EncodedList:
    def __init__(self, rows: Optional[Iterable[str]] = None):
        self.rows: List[str] = list(rows) if rows else []

    def _decode(self, raw: str, index: int):
        raise NotImplementedError

    def get_items(self):
        '''
        Returns the decoded items; rows that cannot be decoded are skipped.
        '''
        items = []
        for index, raw in enumerate(self.rows):
            item = self._decode(raw, index)
            if item is not None:
                items.append(item)
        return items

    def _check_index(self, index: int, expected_name: Optional[str] = None):
        if index < 0 or index >= len(self.rows):
            raise ItemNotFoundError(f"No entry at position {index} (list has {len(self.rows)})")
        if expected_name is not None:
            item = self._decode(self.rows[index], index)
            actual = item.name if item is not None else None
            if actual is None or actual.lower() != expected_name.lower():
                raise StaleIndexError(
                    f"Entry at position {index} is {actual!r}, expected {expected_name!r}")

    def remove_at(self, index: int, expected_name: Optional[str] = None) -> str:
        '''
        Removes the row at index and returns it. Positions of later rows shift down,
        so callers holding indices must refresh them; expected_name guards against that.
        '''
        self._check_index(index, expected_name)
        return self.rows.pop(index)

    def to_list(self) -> List[str]:
        return list(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.get_items())
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
