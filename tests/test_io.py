import unittest
from itertools import product
import os
import tempfile
import h5py

from blockeigh import BlockEigh, BlockEighResult
from utils import backends, rand_symmetric, rand_hermitian

class TestIO(unittest.TestCase):

    def setUp(self) -> None:
        self.blockeigh = [BlockEigh(backend) for backend in backends]
        self.shapes = [(5, 5), (2, 4, 4)]
        self.generators = [rand_symmetric, rand_hermitian]

        self.dir = tempfile.mkdtemp()
        self.file = h5py.File(os.path.join(self.dir, "test_io.h5"), "w")

    def tearDown(self) -> None:
        self.file.close()
        os.remove(os.path.join(self.dir, "test_io.h5"))
        os.rmdir(self.dir)

    def test_result(self) -> None:
        for be, shape, gen in product(self.blockeigh, self.shapes, self.generators):
            xp = be.namespace
            name = f"result_{shape}_{gen.__name__}"
            group = self.file.create_group(name)

            ref = be.decompose(gen(xp, *shape))
            be.write(group, ref)
            res = be.read(group, BlockEighResult)

            self.assertEqual(res.time, ref.time)
            for field in ("values", "vectors", "iterations", "frob_norm", "off_norm", "converged"):
                self.assertTrue(xp.all(xp.equal(getattr(res, field), getattr(ref, field))))

            del self.file[name]

    def test_invalid(self) -> None:
        for be in self.blockeigh:
            group = self.file.create_group("invalid")
            self.assertRaises(ValueError, be.write, group, 1.0)
            self.assertRaises(ValueError, be.read, group, float)
            del self.file["invalid"]

if __name__ == "__main__":
    unittest.main()
