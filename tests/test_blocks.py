import unittest
from itertools import product

from blockeigh.blocks import partition, identity, take_diagonal, put_diagonal, zero_diagonal
from blockeigh.utils import take_columns
from utils import backends, rand_symmetric

class TestBlocks(unittest.TestCase):

    def setUp(self):
        self.sizes = [2, 3, 6, 9]
        self.batches = [(), (3,), (2, 2)]

    def test_partition(self):
        for xp, n, batch in product(backends, self.sizes, self.batches):
            mat = rand_symmetric(xp, *batch, n, n)
            quads = partition(mat)
            mid = (n + 1) // 2
            self.assertEqual(quads.mid, mid)
            for block in quads.blocks():
                self.assertEqual(block.shape, (*batch, mid, mid))

            full = quads.combine()
            self.assertTrue(xp.all(xp.equal(full[..., :n, :n], mat)))
            if n % 2 == 1:
                self.assertTrue(xp.all(full[..., n, :] == 0))
                self.assertTrue(xp.all(full[..., :, n] == 0))

    def test_identity(self):
        for xp in backends:
            quads = identity(xp, (4,), 3, xp.float64)
            full = quads.combine()
            self.assertEqual(full.shape, (4, 6, 6))
            self.assertTrue(xp.all(xp.equal(full, xp.eye(6, dtype=xp.float64))))

    def test_diagonal(self):
        for xp in backends:
            mat = xp.reshape(xp.arange(18, dtype=xp.float64), (2, 3, 3))
            diag = take_diagonal(mat)
            self.assertTrue(xp.all(xp.equal(diag, xp.asarray([[0.0, 4.0, 8.0], [9.0, 13.0, 17.0]]))))

            new = put_diagonal(mat, -diag)
            self.assertTrue(xp.all(xp.equal(take_diagonal(new), -diag)))
            self.assertTrue(xp.all(xp.equal(zero_diagonal(new), zero_diagonal(mat))))
            self.assertTrue(xp.all(take_diagonal(zero_diagonal(mat)) == 0))

    def test_where(self):
        for xp in backends:
            first = partition(rand_symmetric(xp, 2, 4, 4))
            second = partition(rand_symmetric(xp, 2, 4, 4))
            mixed = first.where(xp.asarray([True, False]), second)
            self.assertTrue(xp.all(xp.equal(mixed.combine()[0], first.combine()[0])))
            self.assertTrue(xp.all(xp.equal(mixed.combine()[1], second.combine()[1])))

    def test_take_columns(self):
        for xp in backends:
            inf = float("inf")
            vals = xp.asarray([[1.0, inf, 3.0], [4.0, 5.0, 6.0]])
            idxs = xp.asarray([[1, 2, 0], [2, 0, 1]])
            res = take_columns(vals, idxs)
            self.assertTrue(xp.all(xp.equal(res, xp.asarray([[inf, 3.0, 1.0], [6.0, 4.0, 5.0]]))))

            mats = xp.stack([xp.eye(3), 2 * xp.eye(3)])
            mats[0, 1, 0] = inf
            res = take_columns(mats, idxs)
            self.assertTrue(xp.all(xp.equal(res[0], xp.asarray([[0.0, 0.0, 1.0], [1.0, 0.0, inf], [0.0, 1.0, 0.0]]))))
            self.assertTrue(xp.all(xp.equal(res[1], xp.asarray([[0.0, 2.0, 0.0], [0.0, 0.0, 2.0], [2.0, 0.0, 0.0]]))))

if __name__ == "__main__":
    unittest.main()
