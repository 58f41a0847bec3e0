# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from dataclasses import dataclass

from .backend import ArrayLike, namespace_of_arrays, to_floating
from .utils import check_non_neg, check_square, snap_zeros, take_columns

@dataclass
class EigHSolver:
    """
    Eigenvalue decomposition with the linalg extension of the array namespace. The output
    follows the ordering of the block Jacobi method, i.e. descending magnitude.
    """

    #: Entries with a magnitude at most eps are set to zero.
    eps: float = 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "eps":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](self, mat: T, /) -> tuple[T, T]:
        check_square(mat)
        xp = namespace_of_arrays(mat)
        if not hasattr(xp, "linalg"):
            raise NotImplementedError(
                f"Extension linalg is missing from namespace {xp}.")
        vals, vecs = xp.linalg.eigh(to_floating(mat))
        idxs = xp.argsort(xp.abs(vals), axis=-1, descending=True, stable=True)
        vals = take_columns(vals, idxs)
        vecs = take_columns(vecs, idxs)
        return snap_zeros(vals, self.eps), snap_zeros(vecs, self.eps)
