"""An intrusive-style circular doubly linked list with a sentinel head."""


class ListNode:
    """A list entry carrying ``value``; detached until inserted."""

    def __init__(self, value=None):
        self.value = value
        self.prev = None
        self.next = None
        self._owner = None

    def __repr__(self):
        return f"ListNode({self.value!r})"

    def is_detached(self):
        return self.prev is None and self.next is None


class LinkedList:
    """Circular doubly linked list of ``ListNode`` objects.

    An anchor of ``None`` stands for the list head, so inserting before it
    appends at the tail and inserting after it pushes at the front.
    """

    def __init__(self):
        self._head = ListNode()
        self._head.prev = self._head.next = self._head
        self._head._owner = self

    def __repr__(self):
        return f"LinkedList([{', '.join(repr(n.value) for n in self)}])"

    def _anchor(self, anchor):
        if anchor is None:
            return self._head
        if anchor._owner is not self:
            raise ValueError("anchor node is not in this list")
        return anchor

    @staticmethod
    def _check_free(node):
        if not node.is_detached():
            raise ValueError("node is already linked into a list")

    def is_empty(self):
        return self._head.next is self._head

    def insert_before(self, anchor, node):
        anchor = self._anchor(anchor)
        self._check_free(node)
        node.prev = anchor.prev
        node.next = anchor
        anchor.prev.next = node
        anchor.prev = node
        node._owner = self

    def insert_after(self, anchor, node):
        anchor = self._anchor(anchor)
        self._check_free(node)
        node.next = anchor.next
        node.prev = anchor
        anchor.next.prev = node
        anchor.next = node
        node._owner = self

    def push_front(self, node):
        self.insert_after(None, node)

    def push_back(self, node):
        self.insert_before(None, node)

    def remove(self, node):
        """Unlink ``node`` from this list and leave it detached."""
        if node is self._head or node._owner is not self:
            raise ValueError("node is not in this list")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        node._owner = None

    def pop_front(self):
        """Remove and return the first node, or ``None`` if empty."""
        if self.is_empty():
            return None
        node = self._head.next
        self.remove(node)
        return node

    def pop_back(self):
        """Remove and return the last node, or ``None`` if empty."""
        if self.is_empty():
            return None
        node = self._head.prev
        self.remove(node)
        return node

    def __contains__(self, node):
        return any(entry is node for entry in self)

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        """Yield nodes front to back; the yielded node may be removed."""
        node = self._head.next
        while node is not self._head:
            following = node.next
            yield node
            node = following