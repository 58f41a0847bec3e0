# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional
from dataclasses import dataclass
from math import prod
import logging
import time
import opt_einsum as oe

from .backend import ArrayLike, namespace_of_arrays, to_floating, is_complex, get_int_dtype, device
from .arithmetic import Arithmetic, arithmetic_of
from .blocks import Quadrants, partition, identity, take_diagonal
from .permutation import PermutationNetwork
from .sweep import SweepEngine
from .convergence import norms, converged
from .utils import check_non_neg, check_square, snap_zeros, take_columns

logger = logging.getLogger(__name__)

@dataclass(frozen=True, kw_only=True)
class SweepState[T: ArrayLike]:
    """State of the outer iteration, all norms and counters are per batch element."""

    #: Working matrix.
    matrix: Quadrants[T]
    #: Accumulated rotations, the conjugated rows are the eigenvectors of the input matrix.
    vectors: Quadrants[T]
    #: Squared Frobenius norm of the working matrix.
    frob_norm: T
    #: Squared norm of the off-diagonal part of the working matrix.
    off_norm: T
    #: Number of sweeps applied.
    iterations: T

@dataclass(kw_only=True)
class BlockEighResult[T: ArrayLike]:
    #: Eigenvalues with shape (..., n), sorted by descending magnitude.
    values: T
    #: Eigenvectors with shape (..., n, n), column i belongs to values[..., i].
    vectors: T
    #: Number of sweeps performed for every matrix in the batch.
    iterations: T
    #: Final squared Frobenius norm.
    frob_norm: T
    #: Final squared off-diagonal norm.
    off_norm: T
    #: Whether the off-diagonal norm fell below the threshold before max_iter was reached.
    converged: T
    #: Time taken for the decomposition.
    time: float

    def reconstruct(self) -> T:
        """Compute :math:`V \\operatorname{diag}(w) V^H`."""
        xp = namespace_of_arrays(self.vectors)
        return oe.contract("...ij,...j,...kj->...ik",
                           self.vectors, self.values, xp.conj(self.vectors))

@dataclass
class BlockJacobiEigh:
    """
    Eigenvalue decomposition of real symmetric and complex Hermitian matrices with the
    parallel one-sided Jacobi method of Brent and Luk. The matrix is split into four
    quadrants and all pencils on the diagonal of the quadrants are rotated at once, so
    every step is an elementwise array operation. Leading dimensions are batch dimensions.

    Reaching max_iter is not an error, the current estimate is returned.
    """

    #: Convergence threshold of the relative off-diagonal norm. Results below eps are set to zero.
    eps: float = 1e-6

    #: Maximum number of sweeps.
    max_iter: int = 15

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "eps":
            check_non_neg(name, value)
        elif name == "max_iter":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](self, mat: T, /) -> tuple[T, T]:
        res = self.decompose(mat)
        return res.values, res.vectors

    def decompose[T: ArrayLike](
            self,
            mat: T,
            callback: Optional[Callable[[int, SweepState[T]], bool]] = None
            ) -> BlockEighResult[T]:
        """
        Decompose the matrix. The callback is called after every sweep with the sweep
        number and the current state, returning True stops the iteration.
        """
        n = check_square(mat)
        xp = namespace_of_arrays(mat)
        mat = to_floating(mat)
        stamp = time.time()

        batch = tuple(mat.shape[:-2])
        flat = xp.reshape(mat, (prod(batch), n, n)) # type: ignore
        if n == 1:
            res = self._trivial(flat)
        else:
            res = self._decompose(flat, n, callback)

        res.values = xp.reshape(res.values, (*batch, n)) # type: ignore
        res.vectors = xp.reshape(res.vectors, (*batch, n, n)) # type: ignore
        res.iterations = xp.reshape(res.iterations, batch) # type: ignore
        res.frob_norm = xp.reshape(res.frob_norm, batch) # type: ignore
        res.off_norm = xp.reshape(res.off_norm, batch) # type: ignore
        res.converged = xp.reshape(res.converged, batch) # type: ignore
        res.time = time.time() - stamp
        return res

    def _trivial[T: ArrayLike](self, mat: T) -> BlockEighResult[T]:
        xp = namespace_of_arrays(mat)
        batch = mat.shape[0]
        value = mat[:, :, 0]
        if is_complex(xp, mat.dtype):
            value = xp.real(value)
        frob = xp.abs(value[:, 0])**2
        return BlockEighResult(
            values=value,
            vectors=xp.ones((batch, 1, 1), dtype=mat.dtype, device=device(mat)), # type: ignore
            iterations=xp.zeros(batch, dtype=get_int_dtype(xp), device=device(mat)), # type: ignore
            frob_norm=frob,
            off_norm=xp.zeros_like(frob),
            converged=xp.ones(batch, dtype=xp.bool, device=device(mat)), # type: ignore
            time=0.0)

    def _decompose[T: ArrayLike](
            self,
            mat: T,
            n: int,
            callback: Optional[Callable[[int, SweepState[T]], bool]]
            ) -> BlockEighResult[T]:
        xp = namespace_of_arrays(mat)
        field = arithmetic_of(xp, mat.dtype)

        quads = partition(mat)
        mid = quads.mid
        engine = SweepEngine(PermutationNetwork(mid), field)
        vecs = identity(xp, (mat.shape[0],), mid, mat.dtype, device(mat)) # type: ignore

        frob, off = norms(quads)
        state = SweepState(matrix=quads, vectors=vecs, frob_norm=frob, off_norm=off,
                           iterations=xp.zeros(mat.shape[0], dtype=get_int_dtype(xp), device=device(mat))) # type: ignore
        active = xp.logical_not(converged(frob, off, self.eps))

        sweep = 0
        while sweep < self.max_iter and bool(xp.any(active)):
            state = self._step(engine, state, active)
            sweep += 1
            active = xp.logical_not(converged(state.frob_norm, state.off_norm, self.eps))
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("sweep %d: off-diagonal norm %.3e, %d of %d matrices active",
                             sweep, float(xp.max(state.off_norm)),
                             int(xp.sum(xp.astype(active, get_int_dtype(xp)))), mat.shape[0])
            if callback is not None and callback(sweep, state):
                break

        return self._assemble(state, n, field)

    def _step[T: ArrayLike](self, engine: SweepEngine[T], state: SweepState[T], active: T) -> SweepState[T]:
        xp = namespace_of_arrays(state.frob_norm)
        quads, vecs = engine(state.matrix, state.vectors)
        quads = quads.where(active, state.matrix)
        vecs = vecs.where(active, state.vectors)
        frob, off = norms(quads)
        return SweepState(matrix=quads, vectors=vecs, frob_norm=frob, off_norm=off,
                          iterations=state.iterations + xp.astype(active, state.iterations.dtype))

    def _assemble[T: ArrayLike](self, state: SweepState[T], n: int, field: Arithmetic[T]) -> BlockEighResult[T]:
        xp = namespace_of_arrays(state.frob_norm)
        quads = state.matrix
        vals = xp.concat([take_diagonal(quads.tl), take_diagonal(quads.br)], axis=-1)
        if is_complex(xp, vals.dtype):
            vals = xp.real(vals)
        vecs = field.conj(xp.matrix_transpose(state.vectors.combine()))

        # padding
        vals = vals[:, :n]
        vecs = vecs[:, :n, :n]

        idxs = xp.argsort(xp.abs(vals), axis=-1, descending=True, stable=True)
        vals = take_columns(vals, idxs)
        vecs = take_columns(vecs, idxs)

        return BlockEighResult(
            values=snap_zeros(vals, self.eps),
            vectors=snap_zeros(vecs, self.eps),
            iterations=state.iterations,
            frob_norm=state.frob_norm,
            off_norm=state.off_norm,
            converged=converged(state.frob_norm, state.off_norm, self.eps),
            time=0.0)

def eigh[T: ArrayLike](matrix: T, eps: float = 1e-6, max_iter: int = 15) -> tuple[T, T]:
    """
    Eigenvalues and eigenvectors of a real symmetric or complex Hermitian matrix with
    shape (..., n, n), computed with the parallel block Jacobi method. The eigenvalues
    are sorted by descending magnitude, column i of the eigenvectors belongs to
    eigenvalue i.
    """
    return BlockJacobiEigh(eps=eps, max_iter=max_iter)(matrix)
