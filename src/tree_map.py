import logging
from typing import (
    Any, Callable, Generic, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar,
    Union,
)

K = TypeVar('K')
V = TypeVar('V')

logger = logging.getLogger(__name__)


class NullKeyError(ValueError):
    """Raised by put when the key to insert is None."""


class IncomparableKeyError(TypeError):
    """Raised when a key cannot be ordered against a key already in the tree."""


class TreeMap(Generic[K, V]):
    """Key/value map backed by an unbalanced binary search tree.

    Keys are ordered with ``<`` and ``>``, or by the result of ``key(k)``
    when a ``key`` callable is given, as with ``sorted``. ``None`` is never
    a valid key. The tree is never rebalanced, so its shape follows
    insertion order and sorted input degrades it into a chain.

    Removal is not supported. A TreeMap is not thread-safe: callers sharing
    one across threads must serialize every call themselves.
    """

    class Node:
        def __init__(self, key: K, value: V) -> None:
            self.key: K = key
            self.value: V = value
            self.left: Optional['TreeMap.Node'] = None
            self.right: Optional['TreeMap.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.key!r}, {self.value!r})"

    def __init__(self, key: Optional[Callable[[K], Any]] = None) -> None:
        self._key = key
        self._root: Optional[TreeMap.Node] = None
        self._size: int = 0

    def clear(self) -> None:
        logger.debug("clearing tree map with %d entries", self._size)
        self._root = None
        self._size = 0

    def contains_key(self, target: K) -> bool:
        return self._find_node(target) is not None

    def contains_value(self, target: V) -> bool:
        for node in self._pre_order_nodes():
            if node.value is target or node.value == target:
                return True
        return False

    def get(self, target: K, default: Optional[V] = None) -> Optional[V]:
        node = self._find_node(target)
        if node is None:
            return default
        return node.value

    def put(self, key: K, value: V) -> Optional[V]:
        if key is None:
            logger.debug("rejected put with None key")
            raise NullKeyError("tree map does not accept None as a key")

        if self._root is None:
            logger.debug("new root %r", key)
            self._root = TreeMap.Node(key, value)
            self._size += 1
            return None

        node = self._root
        while True:
            cmp = self._compare(key, node.key)
            if cmp < 0:
                if node.left is None:
                    node.left = TreeMap.Node(key, value)
                    self._size += 1
                    return None
                node = node.left
            elif cmp > 0:
                if node.right is None:
                    node.right = TreeMap.Node(key, value)
                    self._size += 1
                    return None
                node = node.right
            else:
                old_value = node.value
                node.value = value
                return old_value

    def put_all(self, other: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> None:
        items = other.items() if hasattr(other, 'items') else other
        for key, value in items:
            self.put(key, value)

    def remove(self, key: K) -> V:
        logger.debug("rejected remove of %r", key)
        raise NotImplementedError("TreeMap does not support removal")

    def entry_set(self) -> Any:
        raise NotImplementedError("TreeMap does not provide an entry set")

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def key_set(self) -> List[K]:
        """Return every key in ascending order."""
        return [node.key for node in self._in_order_nodes()]

    def keys(self) -> List[K]:
        return self.key_set()

    def items(self) -> List[Tuple[K, V]]:
        """Return (key, value) pairs in ascending key order."""
        return [(node.key, node.value) for node in self._in_order_nodes()]

    def values(self) -> List[V]:
        """Return the distinct values stored in the map, in no particular order.

        Values shared by several keys appear once. Unhashable values are
        compared by equality instead of by hash.
        """
        result: List[V] = []
        seen = set()
        unhashable: List[V] = []
        for node in self._pre_order_nodes():
            value = node.value
            try:
                if value in seen:
                    continue
                seen.add(value)
            except TypeError:
                if value in unhashable:
                    continue
                unhashable.append(value)
            result.append(value)
        return result

    def first_key(self) -> K:
        if self._root is None:
            raise ValueError("first_key from empty tree map")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def last_key(self) -> K:
        if self._root is None:
            raise ValueError("last_key from empty tree map")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        best = 0
        stack: List[Tuple[TreeMap.Node, int]] = []
        if self._root is not None:
            stack.append((self._root, 1))
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def copy(self) -> 'TreeMap[K, V]':
        """Create a copy of this TreeMap with the same tree shape.

        Note: values are shared, not copied.
        """
        clone: TreeMap[K, V] = TreeMap(key=self._key)
        for node in self._pre_order_nodes():
            clone.put(node.key, node.value)
        return clone

    # Test hooks. Not for production use.

    def make_node(self, key: K, value: V) -> 'TreeMap.Node':
        """Build a detached node, for assembling trees of a known shape in tests."""
        return TreeMap.Node(key, value)

    def set_tree(self, node: Optional['TreeMap.Node'], size: int) -> None:
        """Install a hand-built tree and entry count, bypassing put."""
        logger.debug("installing tree with size %d", size)
        self._root = node
        self._size = size

    def _find_node(self, target: K) -> Optional[Node]:
        if target is None:
            raise ValueError("tree map keys cannot be None")
        node = self._root
        while node is not None:
            cmp = self._compare(target, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    def _compare(self, a: K, b: K) -> int:
        left, right = (a, b) if self._key is None else (self._key(a), self._key(b))
        try:
            if left < right:
                return -1
            if left > right:
                return 1
        except TypeError as exc:
            raise IncomparableKeyError(
                f"cannot compare key {a!r} with key {b!r}"
            ) from exc
        # nan and sets can be unordered yet unequal
        if left == right:
            return 0
        raise IncomparableKeyError(f"key {a!r} has no ordering against key {b!r}")

    def _in_order_nodes(self) -> Iterator[Node]:
        stack: List[TreeMap.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _pre_order_nodes(self) -> Iterator[Node]:
        stack: List[TreeMap.Node] = []
        if self._root is not None:
            stack.append(self._root)
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.key_set())

    def __repr__(self) -> str:
        items = ", ".join(f"{n.key!r}: {n.value!r}" for n in self._in_order_nodes())
        return f"TreeMap({{{items}}})"

    def __str__(self) -> str:
        return f"TreeMap(size={self._size})"
