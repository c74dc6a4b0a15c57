"""
src/persistent_queue/signals.py
Ontología de Señales v1.0.
Resultados distinguidos que sustituyen a las excepciones en los bordes de la cola.
"""
from enum import Enum
from typing import Any, NamedTuple, Union

# =============================================================================
# SEÑALES (Resultados sin valor)
# =============================================================================
class Signal(Enum):
    """
    Valores centinela devueltos (nunca lanzados) por la cola.
    Se comparan por identidad: `resultado is EMPTY`.
    """
    EMPTY         = "empty"          # No hay elemento en el extremo pedido
    INVALID_SPLIT = "invalid_split"  # Índice de split fuera de [0, len]

    def __repr__(self) -> str:
        return self.name


EMPTY         = Signal.EMPTY
INVALID_SPLIT = Signal.INVALID_SPLIT


# =============================================================================
# VALOR PRESENTE (El 'Some' de un Option)
# =============================================================================
class Value(NamedTuple):
    """
    Envoltorio inmutable de un elemento presente.
    Permite distinguir una cola que contiene None de una cola vacía.
    """
    item: Any

    def __repr__(self) -> str:
        return f"Value({self.item!r})"


# Value(x) | EMPTY
Option = Union[Value, Signal]


def is_signal(obj: Any) -> bool:
    """True si `obj` es una señal (EMPTY / INVALID_SPLIT) y no un resultado."""
    return isinstance(obj, Signal)
