# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .backend import ArrayLike, ArrayNamespace, DType, namespace_of_arrays, device

def diagonal_mask(xp: ArrayNamespace, size: int, dev=None) -> ArrayLike:
    return xp.eye(size, dtype=xp.bool, device=dev)

def take_diagonal[T: ArrayLike](mat: T) -> T:
    """Diagonal of the trailing two axes, shape (..., k)."""
    xp = namespace_of_arrays(mat)
    mask = diagonal_mask(xp, mat.shape[-1], device(mat)) # type: ignore
    return xp.sum(xp.where(mask, mat, xp.zeros_like(mat)), axis=-1)

def put_diagonal[T: ArrayLike](mat: T, diag: ArrayLike) -> T:
    """Copy of mat with its diagonal replaced by diag, which broadcasts against (..., k)."""
    xp = namespace_of_arrays(mat)
    mask = diagonal_mask(xp, mat.shape[-1], device(mat)) # type: ignore
    diag = xp.astype(diag, mat.dtype)
    return xp.where(mask, diag[..., xp.newaxis, :], mat)

def zero_diagonal[T: ArrayLike](mat: T) -> T:
    xp = namespace_of_arrays(mat)
    mask = diagonal_mask(xp, mat.shape[-1], device(mat)) # type: ignore
    return xp.where(mask, xp.zeros_like(mat), mat)

@dataclass(frozen=True)
class Quadrants[T: ArrayLike]:
    """
    Square matrix of even size 2*mid, stored as its four mid x mid blocks
    [[tl, tr], [bl, br]]. Records are never modified, every update creates
    a new instance.
    """

    #: Top left block.
    tl: T
    #: Top right block.
    tr: T
    #: Bottom left block.
    bl: T
    #: Bottom right block.
    br: T

    @property
    def mid(self) -> int:
        return self.tl.shape[-1] # type: ignore

    def blocks(self) -> tuple[T, T, T, T]:
        return self.tl, self.tr, self.bl, self.br

    def combine(self) -> T:
        """Concatenate the blocks back into one (..., 2*mid, 2*mid) array."""
        xp = namespace_of_arrays(self.tl)
        top = xp.concat([self.tl, self.tr], axis=-1)
        bottom = xp.concat([self.bl, self.br], axis=-1)
        return xp.concat([top, bottom], axis=-2)

    def where(self, mask: ArrayLike, other: "Quadrants[T]") -> "Quadrants[T]":
        """Blockwise select, mask is one boolean per batch element."""
        xp = namespace_of_arrays(self.tl)
        cond = mask[:, xp.newaxis, xp.newaxis]
        return Quadrants(*(xp.where(cond, a, b) for a, b in zip(self.blocks(), other.blocks())))

def partition[T: ArrayLike](mat: T) -> Quadrants[T]:
    """
    Split (..., n, n) into quadrants of size ceil(n/2). For odd n, tr gets a zero
    column appended, bl a zero row and br both, so the padded index is isolated.
    """
    xp = namespace_of_arrays(mat)
    n = mat.shape[-1]
    mid = (n + 1) // 2 # type: ignore
    tl, tr = mat[..., :mid, :mid], mat[..., :mid, mid:]
    bl, br = mat[..., mid:, :mid], mat[..., mid:, mid:]
    if n % 2 == 1: # type: ignore
        batch = mat.shape[:-2]
        dev = device(mat)
        col = xp.zeros((*batch, mid, 1), dtype=mat.dtype, device=dev)
        row = xp.zeros((*batch, 1, mid), dtype=mat.dtype, device=dev)
        tr = xp.concat([tr, col], axis=-1)
        bl = xp.concat([bl, row], axis=-2)
        br = xp.concat([xp.concat([br, col[..., :-1, :]], axis=-1), row], axis=-2)
    return Quadrants(tl, tr, bl, br)

def identity[T: ArrayLike](xp: ArrayNamespace[T], batch: tuple[int, ...], mid: int, dtype: DType, dev=None) -> Quadrants[T]:
    """Identity of size 2*mid split into quadrants, broadcast over the batch shape."""
    eye = xp.eye(mid, dtype=dtype, device=dev)
    zeros = xp.zeros((*batch, mid, mid), dtype=dtype, device=dev)
    eye = eye + zeros
    return Quadrants(eye, zeros, zeros, eye)
