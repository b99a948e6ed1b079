"""Coleccion ordenada por posicion usada por los servicios del servidor."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar, overload

from shared.errors import OutOfRangeError

T = TypeVar("T")


class OrderedStore(Generic[T]):
    """Secuencia que conserva el orden de insercion.

    No detecta duplicados ni impone otro orden: las reglas de negocio quedan
    en los servicios que la usan.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def append(self, item: T) -> None:
        """Agrega un elemento al final."""
        self._items.append(item)

    def get(self, index: int) -> T:
        """Retorna el elemento en la posicion indicada."""
        self._check_index(index)
        return self._items[index]

    def remove_at(self, index: int) -> T:
        """Elimina y retorna el elemento en la posicion indicada."""
        self._check_index(index)
        return self._items.pop(index)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def view(self, reverse: bool = False) -> OrderedView[T]:
        """Retorna una vista de solo lectura sobre el contenido actual."""
        return OrderedView(self, reverse=reverse)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        for index in range(len(self._items)):
            yield self._items[index]

    def __reversed__(self) -> Iterator[T]:
        for index in range(len(self._items) - 1, -1, -1):
            yield self._items[index]

    def _check_index(self, index: int) -> None:
        # Sin indices negativos estilo Python: solo [0, size).
        if index < 0 or index >= len(self._items):
            raise OutOfRangeError(index, len(self._items))


class OrderedView(Sequence[T]):
    """Vista de solo lectura sobre un OrderedStore.

    Refleja el estado actual del store en cada lectura. Cada iteracion empieza
    de nuevo, por lo que la vista se puede recorrer varias veces.
    """

    def __init__(self, store: OrderedStore[T], reverse: bool = False) -> None:
        self._store = store
        self._reverse = reverse

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return list(self)[index]

        if self._reverse:
            size = self._store.size()
            if index < 0 or index >= size:
                raise OutOfRangeError(index, size)
            return self._store.get(size - 1 - index)
        return self._store.get(index)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[T]:
        if self._reverse:
            return reversed(self._store)
        return iter(self._store)

    def __reversed__(self) -> Iterator[T]:
        if self._reverse:
            return iter(self._store)
        return reversed(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, reverse={self._reverse})"
