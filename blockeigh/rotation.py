# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .backend import ArrayLike, namespace_of_arrays
from .arithmetic import Arithmetic
from .blocks import Quadrants, take_diagonal

#: Relative size below which an off-diagonal pencil entry is treated as zero.
DIAGONAL_TOLERANCE = 1e-5

@dataclass(frozen=True)
class Rotation[T: ArrayLike]:
    #: New top diagonal values after diagonalizing the pencils.
    rt1: T
    #: New bottom diagonal values after diagonalizing the pencils.
    rt2: T
    #: Cosine of the rotations, real.
    c: T
    #: Sine of the rotations, carries the phase for complex input.
    s: T

def calc_rotation[T: ArrayLike](quads: Quadrants[T], field: Arithmetic[T]) -> Rotation[T]:
    """
    Jacobi rotations diagonalizing the 2x2 pencils [[tl_ii, tr_ii], [conj(tr_ii), br_ii]]
    for all diagonal positions i at once. bl is not needed, the pencil is Hermitian.
    """
    xp = namespace_of_arrays(quads.tl)
    tl = xp.real(take_diagonal(quads.tl))
    br = xp.real(take_diagonal(quads.br))
    tr, phase = field.phase(take_diagonal(quads.tr))

    zero_tr = tr == 0
    safe_tr = xp.where(zero_tr, xp.ones_like(tr), tr)
    tau = xp.where(zero_tr, xp.zeros_like(tr), (br - tl) / (2 * safe_tr))

    root = xp.sqrt(1 + tau**2)
    t = 1 / (tau + xp.where(tau >= 0, root, -root))

    # already diagonal up to noise
    pred = xp.abs(tr) <= DIAGONAL_TOLERANCE * xp.minimum(xp.abs(br), xp.abs(tl))
    t = xp.where(pred, xp.zeros_like(t), t)

    c = 1 / xp.sqrt(1 + t**2)
    s = field.sine(t * c, phase)

    return Rotation(rt1=tl - t * tr, rt2=br + t * tr, c=c, s=s)
