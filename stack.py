class Stack:
    """A growable LIFO. Popping or peeking an empty stack returns None.

    >>> s = Stack([1, 2])
    >>> s.push(3)
    >>> s.pop(), s.peek(), len(s)
    (3, 2, 2)
    >>> Stack().pop() is None
    True
    """

    def __init__(self, items=()):
        self._items = list(items)

    def push(self, x):
        self._items.append(x)

    def pop(self):
        return self._items.pop() if self._items else None

    def peek(self):
        return self._items[-1] if self._items else None

    def is_empty(self):
        return not self._items

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"
