import pure_random
import unittest


class PureRandomTest(unittest.TestCase):
    def test_reproducible(self):
        a = pure_random.seed(42)
        b = pure_random.seed(42)
        xs, ys = [], []
        for i in range(100):
            x, a = pure_random.next(a)
            y, b = pure_random.next(b)
            xs.append(x)
            ys.append(y)
        self.assertEqual(xs, ys)
        self.assertEqual(a, b)

    def test_state_not_consumed(self):
        s = pure_random.seed(pure_random.DEFAULT_SEED)
        x1, s1 = pure_random.next(s)
        x2, s2 = pure_random.next(s)
        self.assertEqual(x1, x2)
        self.assertEqual(s1, s2)
        self.assertNotEqual(s, s1)

    def test_word_range(self):
        s = pure_random.seed(7)
        words = set()
        for i in range(1000):
            w, s = pure_random.next(s)
            self.assertTrue(0 <= w < 2 ** pure_random.WORD_BITS)
            words.add(w)
        self.assertEqual(len(words), 1000)
        self.assertTrue(any(w >= 2 ** 32 for w in words))

    def test_different_seeds(self):
        x, _ = pure_random.next(pure_random.seed(1))
        y, _ = pure_random.next(pure_random.seed(2))
        self.assertNotEqual(x, y)


if __name__ == '__main__':
    unittest.main()
