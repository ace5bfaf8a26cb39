"""A list that reports structural edits to its owner"""

__all__ = ['ObservableList']

from collections.abc import MutableSequence
from typing import Callable, Generic, Iterable, List, Optional, Type, TypeVar, Union

_T = TypeVar('_T')


class ObservableList(MutableSequence, Generic[_T]):
    """
    A mutable sequence that invokes callbacks whenever an item enters or leaves
    it, followed by a single change notification per edit.

    Args:
        items: (Iterable, optional)
            The initial contents. No callbacks are fired for these.

        item_type: (type, optional)
            If provided, every inserted item must be an instance of this type,
            otherwise a TypeError is raised.

        on_added: (Callable, optional)
            Called with each item inserted into the list

        on_removed: (Callable, optional)
            Called with each item removed from the list, after it has been removed

        on_changed: (Callable, optional)
            Called with no arguments once per structural edit
    """

    def __init__(
        self,
        items: Optional[Iterable[_T]] = None,
        item_type: Optional[Type] = None,
        on_added: Optional[Callable[[_T], None]] = None,
        on_removed: Optional[Callable[[_T], None]] = None,
        on_changed: Optional[Callable[[], None]] = None,
    ):
        self.item_type = item_type
        self._items: List[_T] = []
        for item in items or []:
            self._check(item)
            self._items.append(item)

        self.on_added = on_added
        self.on_removed = on_removed
        self.on_changed = on_changed

    def __eq__(self, other):
        if isinstance(other, ObservableList):
            return self._items == other._items

        if isinstance(other, list):
            return self._items == other

        return False

    def __repr__(self):
        return f'<ObservableList of {len(self._items)} items>'

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: Union[int, slice], value):
        if isinstance(index, slice):
            value = list(value)
            for item in value:
                self._check(item)
            removed = self._items[index]
            self._items[index] = value
            added = value
        else:
            self._check(value)
            removed = [self._items[index]]
            self._items[index] = value
            added = [value]

        self._notify(added, removed)

    def __delitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            removed = self._items[index]
        else:
            removed = [self._items[index]]

        del self._items[index]
        self._notify([], removed)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: _T):
        self._check(value)
        self._items.insert(index, value)
        self._notify([value], [])

    def clear(self):
        if not self._items:
            return

        removed, self._items = self._items, []
        self._notify([], removed)

    def extend(self, values: Iterable[_T]):
        values = list(values)
        if not values:
            return

        for value in values:
            self._check(value)

        self._items.extend(values)
        self._notify(values, [])

    def contains_instance(self, item: _T) -> bool:
        """Membership test by object identity rather than equality"""
        return any(x is item for x in self._items)

    def _check(self, item):
        if self.item_type is not None and not isinstance(item, self.item_type):
            raise TypeError(
                f'Expected {self.item_type.__name__}, got {type(item).__name__}'
            )

    def _notify(self, added: List[_T], removed: List[_T]):
        if self.on_removed:
            for item in removed:
                self.on_removed(item)

        if self.on_added:
            for item in added:
                self.on_added(item)

        if self.on_changed:
            self.on_changed()
