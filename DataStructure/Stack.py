import logging
import operator
from typing import Optional, SupportsIndex

logger = logging.getLogger(__name__)


class Node:
    """Nodo de lista simplemente enlazada. Es dueño exclusivo de `next`."""

    __slots__ = ("data", "next")

    def __init__(self, data: int, next_node: Optional["Node"] = None):
        self.data = data
        self.next = next_node

    def __repr__(self):
        return f"Node({self.data})"


class Stack:
    """
    Pila (LIFO) de enteros sobre una lista simplemente enlazada.
    La pila es dueña del primer nodo y cada nodo es dueño del siguiente.

    Complejidad: O(1) push/pop/peek, O(n) destroy sin recursión
    """

    head: Optional[Node] = None

    def __init__(self):
        self.head = None

    def push(self, value: SupportsIndex) -> None:
        """Agrega value al tope; el tope anterior pasa a ser su next"""
        value = operator.index(value)

        # Vaciar el slot antes de construir el nodo nuevo
        prev_head, self.head = self.head, None
        self.head = Node(value, prev_head)

    def pop(self) -> Optional[int]:
        """Extrae y retorna el valor del tope, o None si está vacía"""
        node, self.head = self.head, None
        if node is None:
            return None

        self.head, node.next = node.next, None
        return node.data

    def peek(self) -> Optional[int]:
        """Retorna el valor del tope sin extraerlo"""
        if self.head is None:
            return None
        return self.head.data

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return self.head is None

    def _release_chain(self) -> int:
        """
        Libera la cadena nodo por nodo con un ciclo explícito.
        Cada nodo pierde su next antes de soltarse, así que liberarlo
        no arrastra al resto de la cadena y no se anidan frames.
        """
        released = 0
        cur_link, self.head = self.head, None
        while cur_link is not None:
            node = cur_link
            cur_link, node.next = node.next, None
            released += 1
        return released

    def destroy(self) -> int:
        """
        Libera todos los nodos. Retorna cuántos se liberaron.
        La pila queda vacía y puede volver a usarse.
        """
        released = self._release_chain()
        logger.debug("Stack destroyed: %d nodes released", released)
        return released

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()
        return False

    def __del__(self):
        # Sin logging: puede estar desmontado al cerrar el intérprete
        self._release_chain()

    def __repr__(self):
        if self.head is None:
            return "Stack(empty)"
        return f"Stack(head={self.head.data})"
