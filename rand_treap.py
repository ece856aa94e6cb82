"""Treap whose priorities come from a carried pseudo-random generator.

A RandTreap is a value: insert and delete return a new RandTreap and leave
the old one usable. The generator state travels with the tree, so two treaps
built from the same seed by the same inserts have the same shape.
"""
import logging

import pure_random
import treap

logger = logging.getLogger(__name__)

_DEFAULT_GEN = pure_random.seed(pure_random.DEFAULT_SEED)


class RandTreap:
    __slots__ = ('gen', 'tree')

    def __init__(self, gen, tree):
        object.__setattr__(self, 'gen', gen)
        object.__setattr__(self, 'tree', tree)

    def __setattr__(self, name, value):
        raise AttributeError('RandTreap is immutable')

    @classmethod
    def empty_with_gen(cls, gen):
        return cls(gen, treap.empty())

    @classmethod
    def empty(cls):
        return cls.empty_with_gen(_DEFAULT_GEN)

    @classmethod
    def singleton_with_gen(cls, gen, key, value):
        priority, gen = pure_random.next(gen)
        return cls(gen, treap.singleton(key, priority, value))

    @classmethod
    def singleton(cls, key, value):
        return cls.singleton_with_gen(_DEFAULT_GEN, key, value)

    @classmethod
    def from_list(cls, pairs):
        t = cls.empty()
        for key, value in pairs:
            t = t.insert(key, value)
        logger.debug('built treap of %d keys', len(t))
        return t

    def lookup(self, key):
        return treap.lookup(key, self.tree)

    def insert(self, key, value):
        priority, gen = pure_random.next(self.gen)
        tree = treap.insert(key, priority, value, self.tree)
        if tree.size == self.tree.size:
            logger.debug('overwrote key %r', key)
        return RandTreap(gen, tree)

    def delete(self, key):
        return RandTreap(self.gen, treap.delete(key, self.tree))

    def to_list(self):
        return treap.to_list(self.tree)

    def keys(self):
        return treap.keys(self.tree)

    def map_values(self, f):
        """Apply f to every value; keys, priorities and shape are kept."""
        return RandTreap(self.gen, treap.map_values(f, self.tree))

    def __getitem__(self, key):
        # lookup() cannot tell a missing key from a stored None
        node = treap.find(key, self.tree)
        if node.is_empty():
            raise KeyError("%r not found" % (key,))
        return node.value

    def __contains__(self, key):
        return not treap.find(key, self.tree).is_empty()

    def __len__(self):
        return treap.size(self.tree)

    def __iter__(self):
        return iter(self.to_list())

    def __eq__(self, other):
        if not isinstance(other, RandTreap):
            return NotImplemented
        return self.gen == other.gen and self.tree == other.tree

    __hash__ = None

