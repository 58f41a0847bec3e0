# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for the parts of the array API standard used by blockeigh."""

from typing import Any, Protocol, Self, Sequence

type Device = Any
type DType = Any

class ArrayLike(Protocol):
    """Array object as described by the array API standard."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __add__(self, other: Any, /) -> Self: ...
    def __radd__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __rsub__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __rmul__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __rtruediv__(self, other: Any, /) -> Self: ...
    def __pow__(self, other: Any, /) -> Self: ...
    def __neg__(self) -> Self: ...
    def __matmul__(self, other: Any, /) -> Self: ...

class ArrayNamespace[T: ArrayLike](Protocol):
    """Array API namespace, e.g. the one returned by array_api_compat.array_namespace."""

    bool: DType
    float64: DType

    def __array_namespace_info__(self) -> Any: ...

    def asarray(self, obj: Any, /, *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def astype(self, x: T, dtype: DType, /) -> T: ...
    def isdtype(self, dtype: DType, kind: Any, /) -> bool: ...
    def zeros(self, shape: int | tuple[int, ...], *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def ones(self, shape: int | tuple[int, ...], *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def eye(self, n_rows: int, n_cols: int | None = None, /, *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def arange(self, start: int, /, stop: int | None = None, *, dtype: DType | None = None, device: Device | None = None) -> T: ...
    def zeros_like(self, x: T, /) -> T: ...
    def ones_like(self, x: T, /) -> T: ...
    def reshape(self, x: T, shape: tuple[int, ...], /) -> T: ...
    def concat(self, arrays: Sequence[T], /, *, axis: int = 0) -> T: ...
    def matrix_transpose(self, x: T, /) -> T: ...
    def where(self, condition: T, x1: Any, x2: Any, /) -> T: ...
    def argsort(self, x: T, /, *, axis: int = -1, descending: bool = False, stable: bool = True) -> T: ...
    def sum(self, x: T, /, *, axis: int | tuple[int, ...] | None = None) -> T: ...
    def any(self, x: T, /) -> T: ...
    def logical_not(self, x: T, /) -> T: ...
    def all(self, x: T, /) -> T: ...
    def abs(self, x: T, /) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def conj(self, x: T, /) -> T: ...
    def real(self, x: T, /) -> T: ...
    def minimum(self, x1: T, x2: T, /) -> T: ...
    def max(self, x: T, /) -> T: ...
    def equal(self, x1: T, x2: Any, /) -> T: ...
    def matmul(self, x1: T, x2: T, /) -> T: ...
    def broadcast_to(self, x: T, /, shape: tuple[int, ...]) -> T: ...
    def take_along_axis(self, x: T, indices: T, /, *, axis: int = -1) -> T: ...
    linalg: Any
    newaxis: None
