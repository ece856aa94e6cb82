class Node:
    def __init__(self, left, key, priority, value, right):
        self.key = key
        self.priority = priority
        self.value = value
        self._left = left
        self._right = right
        self.size = 1
        if left is not None:
            self.size += left.size + right.size

    def left(self):
        return self._left

    def right(self):
        return self._right

    def is_empty(self):
        return self is Node.sentinel

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self is other
        return (self.key == other.key and self.priority == other.priority
                and self.value == other.value
                and self._left == other._left and self._right == other._right)

    __hash__ = None

Node.sentinel = Node(None, None, None, None, None)
Node.sentinel.size = 0


def empty():
    return Node.sentinel


def singleton(key, priority, value):
    return Node(Node.sentinel, key, priority, value, Node.sentinel)


def size(tree):
    return tree.size


def find(key, tree):
    """Return the node holding key, or Node.sentinel."""
    node = tree
    while not node.is_empty() and key != node.key:
        if key < node.key:
            node = node.left()
        else:
            node = node.right()
    return node


def lookup(key, tree):
    node = find(key, tree)
    if node.is_empty():
        return None
    return node.value


def _split(node, key):
    """Partition node into (keys < key, keys > key), dropping key itself."""
    if node.is_empty():
        return Node.sentinel, Node.sentinel
    if node.key < key:
        less, greater = _split(node.right(), key)
        return Node(node.left(), node.key, node.priority, node.value, less), greater
    if key < node.key:
        less, greater = _split(node.left(), key)
        return less, Node(greater, node.key, node.priority, node.value, node.right())
    return node.left(), node.right()


def _merge(left, right):
    """Join two trees where every key of left is below every key of right."""
    if left.is_empty():
        return right
    if right.is_empty():
        return left
    if left.priority >= right.priority:
        return Node(left.left(), left.key, left.priority, left.value,
                    _merge(left.right(), right))
    return Node(_merge(left, right.left()), right.key, right.priority,
                right.value, right.right())


def insert(key, priority, value, tree):
    """Insert or overwrite key. An overwrite takes the new priority too."""
    if tree.is_empty():
        return singleton(key, priority, value)

    # equal priorities keep the existing node on top
    if priority > tree.priority:
        less, greater = _split(tree, key)
        return Node(less, key, priority, value, greater)

    if key == tree.key:
        # priority <= tree.priority here, so the rebuilt subtree still fits
        # under the parent
        return insert(key, priority, value, _merge(tree.left(), tree.right()))

    if key < tree.key:
        return Node(insert(key, priority, value, tree.left()),
                    tree.key, tree.priority, tree.value, tree.right())
    return Node(tree.left(), tree.key, tree.priority, tree.value,
                insert(key, priority, value, tree.right()))


def delete(key, tree):
    if tree.is_empty():
        return tree

    if key == tree.key:
        return _merge(tree.left(), tree.right())

    if key < tree.key:
        left = delete(key, tree.left())
        if left is tree.left():
            return tree
        return Node(left, tree.key, tree.priority, tree.value, tree.right())

    right = delete(key, tree.right())
    if right is tree.right():
        return tree
    return Node(tree.left(), tree.key, tree.priority, tree.value, right)


def _items(node, out):
    if not node.is_empty():
        _items(node.left(), out)
        out.append((node.key, node.priority, node.value))
        _items(node.right(), out)


def items(tree):
    """All (key, priority, value) triples in ascending key order."""
    out = []
    _items(tree, out)
    return out


def to_list(tree):
    return [(k, v) for k, _, v in items(tree)]


def keys(tree):
    return [k for k, _, _ in items(tree)]



def map_values(f, tree):
    if tree.is_empty():
        return tree
    return Node(map_values(f, tree.left()), tree.key, tree.priority,
                f(tree.value), map_values(f, tree.right()))
