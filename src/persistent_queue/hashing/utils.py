"""
src/persistent_queue/hashing/utils.py
Utilidades de hashing de bajo nivel.
Firma de contenido para secuencias persistentes (independiente de la forma interna).
"""
from typing import Any, Iterable

MASK_64 = 0xFFFFFFFFFFFFFFFF

# Constantes de Mezcla (Avalanche Primes)
PRIME_1 = 0xbf58476d1ce4e5b9
PRIME_2 = 0x94d049bb133111eb

# Semilla de la secuencia vacía
SEED = 0x9e3779b97f4a7c15


def avalanche(h: int) -> int:
    """
    Avalanche Finalizer (splitmix64).
    Garantiza dispersión uniforme y determinismo en 64 bits.
    """
    h &= MASK_64
    h ^= (h >> 31)
    h = (h * PRIME_1) & MASK_64
    h ^= (h >> 27)
    h = (h * PRIME_2) & MASK_64
    h ^= (h >> 33)
    return h


def sequence_hash(items: Iterable[Any]) -> int:
    """
    Hash de una secuencia ordenada en O(N).
    Dos secuencias con los mismos elementos en el mismo orden dan el mismo valor,
    sin importar cómo estén repartidos entre listas internas.
    """
    h = SEED
    count = 0
    for item in items:
        # El orden importa: el acumulado se mezcla antes de absorber cada elemento
        h = ((h ^ (hash(item) & MASK_64)) * PRIME_1) & MASK_64
        h ^= (h >> 29)
        count += 1

    # La longitud separa [] de [x] cuando hash(x) colisiona con la semilla
    h = (h ^ count) * PRIME_2
    return avalanche(h)
