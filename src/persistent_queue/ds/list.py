"""
src/persistent_queue/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Versión 3.0: Celdas nativas con longitud cacheada y compartición estructural.
"""
from typing import Optional, Iterator, Iterable, Any, List as PyList, Callable, TypeVar

from ..hashing.utils import sequence_hash

T = TypeVar('T')

# Límite de elementos mostrados por __repr__ (seguridad para logs)
REPR_LIMIT = 10


class ConsList:
    """
    Lista Inmutable Persistente.
    Cada celda guarda (head, tail, size). La cola (tail) se comparte, nunca se copia.
    Soporta operaciones funcionales (Filter, Take, Drop) sin recursión.
    """
    __slots__ = ('_head', '_tail', '_size')

    def __init__(self, head: Any = None, tail: Optional['ConsList'] = None):
        # Sin cola es la lista vacía (Nil): no guarda head
        if tail is None:
            self._head = None
            self._tail = None
            self._size = 0
            return
        if not isinstance(tail, ConsList):
            raise TypeError(f"Tail must be ConsList, got {type(tail)}")
        self._head = head
        self._tail = tail
        self._size = tail._size + 1

    @staticmethod
    def nil() -> 'ConsList':
        return _NIL

    @staticmethod
    def cons(head: Any, tail: 'ConsList') -> 'ConsList':
        """O(1) Prepend. El constructor valida que tail sea una lista."""
        return ConsList(head, tail)

    @staticmethod
    def from_python(items: Iterable[Any]) -> 'ConsList':
        """O(N). Construye desde cualquier iterable Python (head = primer elemento)."""
        if not isinstance(items, (list, tuple)):
            items = list(items)
        acc = _NIL
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(items):
            acc = ConsList(item, acc)
        return acc

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def head(self) -> Any:
        if self._size == 0: raise IndexError("Head of empty list")
        return self._head

    @property
    def tail(self) -> 'ConsList':
        if self._size == 0: raise IndexError("Tail of empty list")
        return self._tail

    @property
    def last(self) -> Any:
        """Último elemento. O(N)."""
        if self._size == 0: raise IndexError("Last of empty list")
        curr = self
        while curr._size > 1:
            curr = curr._tail
        return curr._head

    # --- FUNCTIONAL API (High Order Functions) ---

    def reverse(self) -> 'ConsList':
        """Nueva lista en orden inverso. O(N)."""
        acc = _NIL
        curr = self
        while curr._size:
            acc = ConsList(curr._head, acc)
            curr = curr._tail
        return acc

    def take(self, n: int) -> 'ConsList':
        """Copia las primeras n celdas. O(n)."""
        if n >= self._size: return self
        if n <= 0: return _NIL

        prefix = []
        curr = self
        while len(prefix) < n:
            prefix.append(curr._head)
            curr = curr._tail
        return ConsList.from_python(prefix)

    def drop(self, n: int) -> 'ConsList':
        """Descarta las primeras n celdas. El sufijo se comparte (sin copia)."""
        curr = self
        while n > 0 and curr._size:
            curr = curr._tail
            n -= 1
        return curr

    def filter(self, predicate: Callable[[Any], bool]) -> 'ConsList':
        """Retorna nueva lista solo con elementos que cumplan predicate(item)."""
        if self._size == 0: return self

        temp_items = []
        for item in self:
            if predicate(item):
                temp_items.append(item)

        # Nada descartado: la lista original ya es el resultado
        if len(temp_items) == self._size: return self
        return ConsList.from_python(temp_items)

    def to_python(self) -> PyList[Any]:
        return list(self)

    # --- PYTHON MAGIC METHODS ---

    def __iter__(self) -> Iterator[Any]:
        """Iterador seguro O(N)."""
        curr = self
        while curr._size:
            yield curr._head
            curr = curr._tail

    def __len__(self) -> int:
        """O(1). La longitud viaja cacheada en cada celda."""
        return self._size

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self._size == 0: return "Nil"

        items = []
        curr = self
        while curr._size and len(items) < REPR_LIMIT:
            items.append(repr(curr._head))
            curr = curr._tail

        if curr._size:
            items.append("...")

        return f"List[{', '.join(items)}]"

    def __eq__(self, other):
        """Igualdad estructural. O(1) si comparten celdas, O(N) en el peor caso."""
        if not isinstance(other, ConsList): return NotImplemented
        if self._size != other._size: return False

        a, b = self, other
        while a._size:
            # Sufijo compartido: el resto es idéntico
            if a is b: return True
            if a._head != b._head: return False
            a, b = a._tail, b._tail
        return True

    def __hash__(self):
        return sequence_hash(self)

    def __reduce__(self):
        # copy/pickle reconstruyen desde una lista plana: sin recursión por celda
        return (ConsList.from_python, (list(self),))


# Nil compartido por todas las listas
_NIL = ConsList()
