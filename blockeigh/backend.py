# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import to_device, device

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def get_float_dtype(xp: ArrayNamespace) -> Any:
    info = xp.__array_namespace_info__()
    return info.default_dtypes()["real floating"]

def is_complex(xp: ArrayNamespace, dtype: DType) -> bool:
    return xp.isdtype(dtype, "complex floating")

def to_floating[T: ArrayLike](mat: T) -> T:
    """Cast integral and boolean arrays to the default floating dtype of their namespace."""
    xp = namespace_of_arrays(mat)
    if xp.isdtype(mat.dtype, ("real floating", "complex floating")):
        return mat
    return xp.astype(mat, get_float_dtype(xp))

def get_int_dtype(xp: ArrayNamespace) -> Any:
    info = xp.__array_namespace_info__()
    return info.default_dtypes()["integral"]

__all__ = ["to_device", "device", "Device", "DType", "ArrayLike", "ArrayNamespace"]
