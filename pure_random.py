import random

WORD_BITS = 64
DEFAULT_SEED = 0


def seed(n):
    """Return an immutable generator state built from the integer n."""
    return random.Random(n).getstate()


def next(state):
    """Draw one unsigned 64 bit word.

    Returns (word, new_state). The given state is left untouched, so the
    same state always yields the same word.
    """
    # copies the whole MT state on every draw
    gen = random.Random()
    gen.setstate(state)
    word = gen.getrandbits(WORD_BITS)
    return word, gen.getstate()
