"""
src/persistent_queue/ds/queue.py
Estructura de Datos Persistente: Cola Doble (Banker's Deque).
Amortized O(1) en ambos extremos. Los bordes vacíos se señalan con EMPTY, nunca con excepciones.
"""
import logging
from typing import Any, Callable, Iterable, Iterator, List as PyList, Tuple, Union

from ..hashing.utils import sequence_hash
from ..signals import EMPTY, INVALID_SPLIT, Option, Signal, Value, is_signal
from .list import ConsList, REPR_LIMIT

logger = logging.getLogger(__name__)


class PersistentQueue:
    """
    Cola Doble Persistente.
    Implementada con dos ConsLists:
      - front: orden lógico (head = primer elemento de la cola).
      - rear:  orden inverso (head = último elemento empujado por detrás).
    Contenido lógico = front ++ reverse(rear).

    Rebalanceo perezoso: sólo cuando se pide un extremo cuya lista está vacía.
    La lista opuesta se parte por la mitad; la mitad más cercana al extremo pedido
    (ceil(n/2) elementos) se invierte hacia él. Potencial = |len(front) - len(rear)|.
    """
    __slots__ = ('_front', '_rear')

    def __init__(self, front: ConsList, rear: ConsList):
        object.__setattr__(self, '_front', front)
        object.__setattr__(self, '_rear', rear)

    def __setattr__(self, name, value):
        raise AttributeError(f"PersistentQueue es inmutable: no se puede asignar '{name}'")

    # =========================================================================
    # CONSTRUCCIÓN
    # =========================================================================
    @staticmethod
    def empty() -> 'PersistentQueue':
        """Crea una cola vacía."""
        return _EMPTY_QUEUE

    @staticmethod
    def from_sequence(items: Iterable[Any]) -> 'PersistentQueue':
        """
        O(N). Cola lógicamente igual a `items`.
        Reparte la secuencia entre front y rear para que ambos extremos
        sean legibles en O(1) desde el principio.
        """
        items = list(items)
        if not items:
            return _EMPTY_QUEUE

        mid = (len(items) + 1) // 2
        front = ConsList.from_python(items[:mid])
        rear = ConsList.from_python(list(reversed(items[mid:])))
        return PersistentQueue(front, rear)

    @staticmethod
    def is_queue(obj: Any) -> bool:
        """Guardián de tipos: True sólo para colas bien formadas."""
        return (isinstance(obj, PersistentQueue)
                and isinstance(obj._front, ConsList)
                and isinstance(obj._rear, ConsList))

    # =========================================================================
    # OPERACIONES NÚCLEO (Amortizadas O(1))
    # =========================================================================
    def push_rear(self, item: Any) -> 'PersistentQueue':
        """Añade al final. O(1). Front se comparte."""
        return PersistentQueue(self._front, ConsList(item, self._rear))

    def push_front(self, item: Any) -> 'PersistentQueue':
        """Añade al principio. O(1). Rear se comparte."""
        return PersistentQueue(ConsList(item, self._front), self._rear)

    def pop_front(self) -> Tuple[Option, 'PersistentQueue']:
        """
        Retorna (Value(head), NewQueue).
        Si está vacía, retorna (EMPTY, self).
        """
        front, rear = self._front, self._rear
        if front.is_empty:
            if rear.is_empty:
                return EMPTY, self
            front, rear = _rebalance(rear, "rear->front")

        return Value(front.head), PersistentQueue(front.tail, rear)

    def pop_rear(self) -> Tuple[Option, 'PersistentQueue']:
        """
        Retorna (Value(last), NewQueue).
        Si está vacía, retorna (EMPTY, self).
        """
        front, rear = self._front, self._rear
        if rear.is_empty:
            if front.is_empty:
                return EMPTY, self
            rear, front = _rebalance(front, "front->rear")

        return Value(rear.head), PersistentQueue(front, rear.tail)

    def peek_front(self) -> Option:
        """Mira el primer elemento sin sacarlo. No reconstruye la cola."""
        if not self._front.is_empty:
            return Value(self._front.head)
        if not self._rear.is_empty:
            return Value(self._rear.last)
        return EMPTY

    def peek_rear(self) -> Option:
        """Mira el último elemento sin sacarlo. No reconstruye la cola."""
        if not self._rear.is_empty:
            return Value(self._rear.head)
        if not self._front.is_empty:
            return Value(self._front.last)
        return EMPTY

    # =========================================================================
    # VARIANTES SIN ENVOLTORIO (Valor desnudo o EMPTY)
    # =========================================================================
    def get_front(self) -> Any:
        res = self.peek_front()
        return res if is_signal(res) else res.item

    def get_rear(self) -> Any:
        res = self.peek_rear()
        return res if is_signal(res) else res.item

    def drop_front(self) -> Union['PersistentQueue', Signal]:
        """Cola sin el primer elemento, o EMPTY."""
        res, rest = self.pop_front()
        return res if is_signal(res) else rest

    def drop_rear(self) -> Union['PersistentQueue', Signal]:
        """Cola sin el último elemento, o EMPTY."""
        res, rest = self.pop_rear()
        return res if is_signal(res) else rest

    # =========================================================================
    # OPERACIONES DERIVADAS
    # =========================================================================
    @property
    def is_empty(self) -> bool:
        return self._front.is_empty and self._rear.is_empty

    def length(self) -> int:
        return len(self._front) + len(self._rear)

    def member(self, item: Any) -> bool:
        for x in self._front:
            if x == item: return True
        for x in self._rear:
            if x == item: return True
        return False

    def to_list(self) -> PyList[Any]:
        """front ++ reverse(rear). O(N)."""
        items = self._front.to_python()
        items.extend(reversed(list(self._rear)))
        return items

    def reverse(self) -> 'PersistentQueue':
        """O(1). Rear ya está almacenada en orden inverso: basta intercambiar roles."""
        return PersistentQueue(self._rear, self._front)

    def join(self, other: 'PersistentQueue') -> 'PersistentQueue':
        """
        Contenido de self seguido del de other.
        Front y rear de self se comparten; los elementos de other se apilan
        sobre rear en O(len(other)).
        """
        if not isinstance(other, PersistentQueue):
            raise TypeError(f"join requiere PersistentQueue, got {type(other)}")
        if other.is_empty: return self
        if self.is_empty: return other

        rear = self._rear
        for item in other:
            rear = ConsList(item, rear)
        return PersistentQueue(self._front, rear)

    def filter(self, predicate: Callable[[Any], bool]) -> 'PersistentQueue':
        """Filtra cada mitad por separado: el orden lógico se conserva."""
        front = self._front.filter(predicate)
        rear = self._rear.filter(predicate)
        if front.is_empty and rear.is_empty:
            return _EMPTY_QUEUE
        return PersistentQueue(front, rear)

    def split(self, n: int) -> Union[Tuple['PersistentQueue', 'PersistentQueue'], Signal]:
        """
        (Primeros n elementos, Resto), ambos en orden original.
        INVALID_SPLIT si n no está en [0, len].
        """
        if isinstance(n, bool) or not isinstance(n, int):
            return INVALID_SPLIT
        size = self.length()
        if n < 0 or n > size:
            return INVALID_SPLIT

        if n == 0: return _EMPTY_QUEUE, self
        if n == size: return self, _EMPTY_QUEUE

        front, rear = self._front, self._rear
        n_front = len(front)
        if n <= n_front:
            # El corte cae dentro de front: el sufijo se comparte con la derecha
            left = PersistentQueue(front.take(n), ConsList.nil())
            right = PersistentQueue(front.drop(n), rear)
        else:
            # El corte cae dentro de rear: los más antiguos (cola de rear) van a la izquierda
            newest = size - n
            left = PersistentQueue(front, rear.drop(newest))
            right = PersistentQueue(ConsList.nil(), rear.take(newest))
        return left, right

    # =========================================================================
    # NOMBRES ALTERNATIVOS (Alias puros, sin lógica)
    # =========================================================================
    # --- API original (estilo Erlang: 'push' entra por detrás) ---
    new = empty
    from_list = from_sequence
    to_sequence = to_list
    push = push_rear
    push_r = push_front
    pop = pop_front
    pop_r = pop_rear
    len = length

    # --- API extendida ---
    get = get_front
    get_r = get_rear
    peek = peek_front
    peek_r = peek_rear
    drop = drop_front
    drop_r = drop_rear

    # --- API Okasaki ---
    cons = push_front
    snoc = push_rear
    head = get_front
    daeh = get_rear
    last = get_rear
    tail = drop_front
    init = drop_rear
    liat = drop_rear
    lait = drop_rear  # Errata histórica de 'liat'

    # =========================================================================
    # PYTHON MAGIC METHODS
    # =========================================================================
    def __iter__(self) -> Iterator[Any]:
        yield from self._front
        yield from reversed(list(self._rear))

    def __reversed__(self) -> Iterator[Any]:
        yield from self._rear
        yield from reversed(list(self._front))

    def __len__(self) -> int:
        return len(self._front) + len(self._rear)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __contains__(self, item: Any) -> bool:
        return self.member(item)

    def __eq__(self, other):
        """Igualdad por contenido lógico, sin importar el reparto front/rear."""
        if not isinstance(other, PersistentQueue): return NotImplemented
        if self is other: return True
        if len(self) != len(other): return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self):
        return sequence_hash(self)

    def __reduce__(self):
        # __setattr__ bloquea la restauración de slots: copy/pickle reconstruyen por contenido
        return (PersistentQueue.from_sequence, (self.to_list(),))

    def __repr__(self):
        # Para debug, mostramos la secuencia lógica (truncada)
        items = []
        for item in self:
            if len(items) == REPR_LIMIT:
                items.append("...")
                break
            items.append(repr(item))
        return f"PersistentQueue[{', '.join(items)}]"


def _rebalance(source: ConsList, direction: str) -> Tuple[ConsList, ConsList]:
    """
    Parte `source` (la lista opuesta al extremo pedido) en dos mitades.
    Retorna (moved, kept):
      - moved: los ceil(n/2) elementos más cercanos al extremo pedido, invertidos.
      - kept:  los floor(n/2) restantes, en su orientación original.
    """
    n = len(source)
    keep = n // 2
    kept = source.take(keep)
    moved = source.drop(keep).reverse()
    logger.debug("Rebalance %s: %d moved, %d kept", direction, n - keep, keep)
    return moved, kept


_EMPTY_QUEUE = PersistentQueue(ConsList.nil(), ConsList.nil())
