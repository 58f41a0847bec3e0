import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

_rng = np.random.default_rng(1234)

def rand_symmetric(xp, *shape: int):
    data = _rng.standard_normal(shape)
    data = data + np.swapaxes(data, -1, -2)
    return xp.asarray(data)

def rand_hermitian(xp, *shape: int):
    data = _rng.standard_normal(shape) + 1j * _rng.standard_normal(shape)
    data = data + np.conj(np.swapaxes(data, -1, -2))
    return xp.asarray(data)

def adjoint(xp, mat):
    return xp.conj(xp.matrix_transpose(mat))

def max_abs(xp, arr) -> float:
    return float(xp.max(xp.abs(arr)))
