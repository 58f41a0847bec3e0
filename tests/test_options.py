import unittest
import threading

from blockeigh import BlockEigh
from blockeigh.typing import OptionType
from utils import backends, rand_symmetric

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.blockeigh = [BlockEigh(backend) for backend in backends]

    def test_options(self) -> None:

        opts = [(lambda be: be.jacobi(eps=1e-8, max_iter=20), OptionType.JACOBI),
                (lambda be: be.reference(eps=1e-12), OptionType.REFERENCE)]

        for be in self.blockeigh:

            for (ofunc, otype) in opts:
                with ofunc(be) as opts1:
                    with ofunc(be) as opts2:
                        self.assertEqual(opts2, be.get_options(otype))
                    self.assertEqual(opts1, be.get_options(otype))

                opt = ofunc(be)
                be.set_options(opt)
                self.assertEqual(opt, be.get_options(otype))

    def test_validation(self) -> None:
        for be in self.blockeigh:
            be.jacobi(eps=0.0)
            self.assertRaises(ValueError, be.jacobi, eps=-1e-6)
            self.assertRaises(ValueError, be.jacobi, max_iter=-2)
            self.assertRaises(ValueError, be.reference, eps=-1.0)

    def test_thread_local(self) -> None:
        for be in self.blockeigh:
            errors = []
            def run():
                try:
                    be.get_options(OptionType.JACOBI)
                except KeyError as err:
                    errors.append(err)
            thread = threading.Thread(target=run)
            thread.start()
            thread.join()
            self.assertEqual(len(errors), 1)

    def test_applied(self) -> None:
        for be in self.blockeigh:
            mat = rand_symmetric(be.namespace, 6, 6)
            with be.jacobi(max_iter=1):
                res = be.decompose(mat)
                self.assertEqual(int(res.iterations), 1)
                res = be.decompose(mat, eps=1e-14, max_iter=2)
                self.assertEqual(int(res.iterations), 2)

if __name__ == "__main__":
    unittest.main()
