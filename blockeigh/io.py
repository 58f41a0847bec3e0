# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Type
import h5py
import numpy as np

from .backend import ArrayNamespace, ArrayLike, to_device
from .jacobi import BlockEighResult

_arrays = ("values", "vectors", "iterations", "frob_norm", "off_norm", "converged")

def write(group: h5py.Group, obj: BlockEighResult) -> None:
    if not isinstance(obj, BlockEighResult):
        raise ValueError("Invalid class.")
    group.attrs["time"] = obj.time
    for name in _arrays:
        data = getattr(obj, name)
        group.create_dataset(name, data=np.asarray(to_device(data, "cpu")))

def read[T: ArrayLike](group: h5py.Group, cls: Type[BlockEighResult[T]], xp: Optional[ArrayNamespace[T]] = None) -> BlockEighResult[T]:
    if cls != BlockEighResult:
        raise ValueError("Invalid class.")
    if xp is None:
        raise ValueError("Array namespace must be provided to read BlockEighResult.")
    data = {}
    for name in _arrays:
        dataset = group[name]
        assert isinstance(dataset, h5py.Dataset)
        data[name] = xp.asarray(dataset[()])
    return BlockEighResult(**data, time=float(get_attr(group, "time")))

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]
