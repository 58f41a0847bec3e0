# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .backend import ArrayLike, namespace_of_arrays
from .arithmetic import Arithmetic
from .blocks import Quadrants, put_diagonal
from .rotation import Rotation, calc_rotation
from .permutation import PermutationNetwork

def rotate_rows[T: ArrayLike](quads: Quadrants[T], rot: Rotation[T], field: Arithmetic[T]) -> Quadrants[T]:
    """Apply the rotations from the left, row i of the top blocks pairs with row i of the bottom blocks."""
    xp = namespace_of_arrays(rot.c)
    c = rot.c[..., :, xp.newaxis]
    s = rot.s[..., :, xp.newaxis]
    s_conj = field.conj(s)
    tl, tr, bl, br = quads.blocks()
    return Quadrants(tl=tl * c - bl * s_conj,
                     tr=tr * c - br * s_conj,
                     bl=tl * s + bl * c,
                     br=tr * s + br * c)

def rotate_cols[T: ArrayLike](quads: Quadrants[T], rot: Rotation[T], field: Arithmetic[T]) -> Quadrants[T]:
    """Apply the adjoint rotations from the right, column i of the left blocks pairs with column i of the right blocks."""
    xp = namespace_of_arrays(rot.c)
    c = rot.c[..., xp.newaxis, :]
    s = rot.s[..., xp.newaxis, :]
    s_conj = field.conj(s)
    tl, tr, bl, br = quads.blocks()
    return Quadrants(tl=tl * c - tr * s,
                     tr=tl * s_conj + tr * c,
                     bl=bl * c - br * s,
                     br=bl * s_conj + br * c)

@dataclass(frozen=True)
class SweepEngine[T: ArrayLike]:
    """
    One sweep of the parallel Jacobi method. Each round diagonalizes the mid pencils
    on the shared diagonal of tl and br simultaneously and then moves the indices
    along the permutation network, until every pair of indices was a pencil once.
    """

    #: Permutation network for the block height.
    network: PermutationNetwork
    #: Real or complex arithmetic of the matrix entries.
    field: Arithmetic[T]

    @property
    def rounds(self) -> int:
        return self.network.rounds

    def __call__(self, mat: Quadrants[T], vecs: Quadrants[T]) -> tuple[Quadrants[T], Quadrants[T]]:
        for _ in range(self.rounds):
            mat, vecs = self.round(mat, vecs)
        return mat, vecs

    def round(self, mat: Quadrants[T], vecs: Quadrants[T]) -> tuple[Quadrants[T], Quadrants[T]]:
        """Single rotation and permutation step, computed from the given snapshot only."""
        rot = calc_rotation(mat, self.field)
        mat = rotate_cols(rotate_rows(mat, rot, self.field), rot, self.field)

        xp = namespace_of_arrays(rot.rt1)
        zeros = xp.zeros_like(rot.rt1)
        mat = Quadrants(tl=put_diagonal(mat.tl, rot.rt1),
                        tr=put_diagonal(mat.tr, zeros),
                        bl=put_diagonal(mat.bl, zeros),
                        br=put_diagonal(mat.br, rot.rt2))
        mat = self.permute(mat)

        vecs = rotate_rows(vecs, rot, self.field)
        vecs = self.permute_rows(vecs)
        return mat, vecs

    def permute_rows(self, quads: Quadrants[T]) -> Quadrants[T]:
        tl, bl = self.network.permute_rows_in_col(quads.tl, quads.bl)
        tr, br = self.network.permute_rows_in_col(quads.tr, quads.br)
        return Quadrants(tl, tr, bl, br)

    def permute_cols(self, quads: Quadrants[T]) -> Quadrants[T]:
        tl, tr = self.network.permute_cols_in_row(quads.tl, quads.tr)
        bl, br = self.network.permute_cols_in_row(quads.bl, quads.br)
        return Quadrants(tl, tr, bl, br)

    def permute(self, quads: Quadrants[T]) -> Quadrants[T]:
        return self.permute_rows(self.permute_cols(quads))
