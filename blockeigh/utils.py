# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, namespace_of_arrays

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must be a positive, got {value}")

def check_square(mat: ArrayLike) -> int:
    if mat.ndim < 2:
        raise ValueError(f"Expected an array with at least two dimensions, got shape {mat.shape}")
    rows, cols = mat.shape[-2], mat.shape[-1]
    if rows != cols:
        raise ValueError(f"Shape mismatch: matrix must be square, got shape {mat.shape}")
    if rows == 0:
        raise ValueError(f"Expected a matrix with at least one row, got shape {mat.shape}")
    return int(rows) # type: ignore

def snap_zeros[T: ArrayLike](arr: T, eps: float) -> T:
    """Replace all entries with magnitude at most eps by exact zeros."""
    xp = namespace_of_arrays(arr)
    return xp.where(xp.abs(arr) <= eps, xp.zeros_like(arr), arr)

def take_columns[T: ArrayLike](arr: T, idxs: ArrayLike) -> T:
    """
    Gather along the last axis with batched indices. arr has shape (..., m, n) or (..., n)
    and idxs (..., n).
    """
    xp = namespace_of_arrays(arr)
    if arr.ndim != idxs.ndim:
        idxs = xp.broadcast_to(idxs[..., xp.newaxis, :], arr.shape)
    return xp.take_along_axis(arr, idxs, axis=-1)
