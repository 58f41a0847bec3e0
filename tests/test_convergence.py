import unittest
from itertools import product

from blockeigh.blocks import partition
from blockeigh.convergence import sq_norm, off_norm, norms, converged
from utils import backends, rand_symmetric, rand_hermitian

class TestConvergence(unittest.TestCase):

    def setUp(self):
        self.sizes = [2, 5, 8]
        self.generators = [rand_symmetric, rand_hermitian]

    def test_norms(self):
        for xp, n, gen in product(backends, self.sizes, self.generators):
            mat = gen(xp, 3, n, n)
            quads = partition(mat)
            frob = xp.sum(xp.abs(mat)**2, axis=(-2, -1))
            mask = xp.eye(n, dtype=xp.bool)
            off = xp.sum(xp.where(mask, xp.zeros_like(mat), xp.abs(mat)**2), axis=(-2, -1))

            self.assertTrue(xp.max(xp.abs(sq_norm(quads) - frob)) < 1e-10)
            self.assertTrue(xp.max(xp.abs(off_norm(quads) - off)) < 1e-10)
            frob2, off2 = norms(quads)
            self.assertTrue(xp.all(xp.equal(frob2, sq_norm(quads))))
            self.assertTrue(xp.all(xp.equal(off2, off_norm(quads))))

    def test_converged(self):
        for xp in backends:
            frob = xp.asarray([1.0, 1.0, 0.0])
            off = xp.asarray([1e-13, 1e-11, 0.0])
            self.assertEqual([bool(b) for b in converged(frob, off, 1e-6)], [True, False, True])

if __name__ == "__main__":
    unittest.main()
