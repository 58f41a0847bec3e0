# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, namespace_of_arrays
from .blocks import Quadrants, zero_diagonal

def sq_norm[T: ArrayLike](quads: Quadrants[T]) -> T:
    """Squared Frobenius norm of the recombined matrix, one value per batch element."""
    xp = namespace_of_arrays(quads.tl)
    total = sum(xp.abs(block)**2 for block in quads.blocks())
    return xp.sum(total, axis=(-2, -1))

def off_norm[T: ArrayLike](quads: Quadrants[T]) -> T:
    """
    Squared Frobenius norm of the off-diagonal part. The diagonals of tr and bl are
    off the main diagonal and therefore included.
    """
    return sq_norm(Quadrants(zero_diagonal(quads.tl), quads.tr,
                             quads.bl, zero_diagonal(quads.br)))

def norms[T: ArrayLike](quads: Quadrants[T]) -> tuple[T, T]:
    """Frobenius and off-diagonal norm, both squared."""
    return sq_norm(quads), off_norm(quads)

def converged[T: ArrayLike](frob: T, off: T, eps: float) -> T:
    return off <= eps**2 * frob
