import unittest
from itertools import product

from blockeigh.arithmetic import arithmetic_of
from blockeigh.blocks import partition, take_diagonal
from blockeigh.rotation import calc_rotation
from blockeigh.sweep import rotate_rows, rotate_cols
from utils import backends, rand_symmetric, rand_hermitian, max_abs

class TestRotation(unittest.TestCase):

    def setUp(self):
        self.generators = [rand_symmetric, rand_hermitian]

    def test_diagonalize_pencils(self):
        for xp, gen in product(backends, self.generators):
            # all pencils of a 2x2 batch are rotated at once
            mat = gen(xp, 16, 2, 2)
            field = arithmetic_of(xp, mat.dtype)
            quads = partition(mat)
            rot = calc_rotation(quads, field)

            self.assertTrue(max_abs(xp, rot.c**2 + xp.abs(rot.s)**2 - 1) < 1e-14)
            new = rotate_cols(rotate_rows(quads, rot, field), rot, field)
            self.assertTrue(max_abs(xp, new.tr) < 1e-12)
            self.assertTrue(max_abs(xp, new.bl) < 1e-12)
            self.assertTrue(max_abs(xp, take_diagonal(new.tl) - rot.rt1) < 1e-12)
            self.assertTrue(max_abs(xp, take_diagonal(new.br) - rot.rt2) < 1e-12)

    def test_known_pencil(self):
        for xp in backends:
            mat = xp.asarray([[2.0, 1.0], [1.0, 2.0]])
            rot = calc_rotation(partition(mat), arithmetic_of(xp, mat.dtype))
            self.assertAlmostEqual(float(rot.rt1[0]), 1.0)
            self.assertAlmostEqual(float(rot.rt2[0]), 3.0)
            self.assertAlmostEqual(float(rot.c[0]), 2**-0.5)
            self.assertAlmostEqual(float(rot.s[0]), 2**-0.5)

    def test_diagonal_pencil(self):
        for xp in backends:
            mats = [xp.asarray([[2.0, 0.0], [0.0, 3.0]]),
                    xp.asarray([[2.0, 1e-9], [1e-9, 3.0]]),
                    xp.asarray([[0.0, 0.0], [0.0, 0.0]]),
                    xp.asarray([[4.0, 0.0], [0.0, 4.0]]),
                    xp.asarray([[1.0, 0.0j], [0.0j, 0.0]])]
            for mat in mats:
                rot = calc_rotation(partition(mat), arithmetic_of(xp, mat.dtype))
                self.assertEqual(float(rot.c[0]), 1.0)
                self.assertEqual(complex(rot.s[0]), 0.0)
                self.assertEqual(float(rot.rt1[0]), float(xp.real(mat[0, 0])))
                self.assertEqual(float(rot.rt2[0]), float(xp.real(mat[1, 1])))

    def test_complex_phase(self):
        for xp in backends:
            mat = xp.asarray([[2.0, 1.0 - 1.0j], [1.0 + 1.0j, 3.0]])
            rot = calc_rotation(partition(mat), arithmetic_of(xp, mat.dtype))
            self.assertAlmostEqual(float(rot.rt1[0]) * float(rot.rt2[0]), 4.0)
            self.assertAlmostEqual(float(rot.rt1[0]) + float(rot.rt2[0]), 5.0)

if __name__ == "__main__":
    unittest.main()
