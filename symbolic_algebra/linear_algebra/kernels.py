import numpy as np
import numba


@numba.njit(cache=True)
def dot_kernel(u, v):
  total = 0.0
  for index in range(u.shape[0]):
    total += u[index] * v[index]
  return total


@numba.njit(cache=True)
def magnitude_squared_kernel(u):
  total = 0.0
  for index in range(u.shape[0]):
    total += u[index] * u[index]
  return total


@numba.njit(cache=True)
def cross3_kernel(u, v):
  out = np.empty(3, dtype=np.float64)
  out[0] = u[1] * v[2] - u[2] * v[1]
  out[1] = -(u[0] * v[2] - u[2] * v[0])
  out[2] = u[0] * v[1] - u[1] * v[0]
  return out
