import functools
import operator as _op
from typing import Callable, Dict, List

import numpy as np
import numba
import sympy as sp

from ..expression import Operator

PROTECTED_EPSILON = 1e-12
POWER_CLIP = 10.0
EXP_CLIP = 10.0


@numba.njit(cache=True, fastmath=True)
def _protected_divide_kernel(left_val, right_val):
  out = np.ones_like(left_val)
  for i in range(left_val.shape[0]):
    if abs(right_val[i]) > PROTECTED_EPSILON:
      out[i] = left_val[i] / right_val[i]
  return out


@numba.njit(cache=True, fastmath=True)
def _protected_log_kernel(operand_val):
  out = np.empty_like(operand_val)
  for i in range(operand_val.shape[0]):
    out[i] = np.log(abs(operand_val[i]) + PROTECTED_EPSILON)
  return out


def _run_kernel(kernel: Callable, *values):
  """Broadcast scalar/array operands to flat float64 arrays, run a numba kernel, restore the shape"""
  arrays = np.broadcast_arrays(*[np.asarray(v, dtype=np.float64) for v in values])
  shape = arrays[0].shape
  flat = [np.array(a, dtype=np.float64).reshape(-1) for a in arrays]
  result = kernel(*flat)
  if not shape:
    return float(result[0])
  return result.reshape(shape)


def protected_divide(left_val, right_val):
  """Division that yields 1.0 wherever the divisor is (numerically) zero"""
  return _run_kernel(_protected_divide_kernel, left_val, right_val)


def protected_log(operand_val):
  """log(|x| + eps), defined everywhere"""
  return _run_kernel(_protected_log_kernel, operand_val)


def _add(operands: List) -> object:
  return functools.reduce(_op.add, operands)


def _subtract(operands: List) -> object:
  return operands[0] - operands[1]


def _multiply(operands: List) -> object:
  return functools.reduce(_op.mul, operands)


def _divide(operands: List) -> object:
  return protected_divide(operands[0], operands[1])


def _power(operands: List) -> object:
  return np.power(operands[0], np.clip(operands[1], -POWER_CLIP, POWER_CLIP))


def _negate(operands: List) -> object:
  return -operands[0]


def _sin(operands: List) -> object:
  return np.sin(operands[0])


def _cos(operands: List) -> object:
  return np.cos(operands[0])


def _exp(operands: List) -> object:
  return np.exp(np.clip(operands[0], -EXP_CLIP, EXP_CLIP))


def _log(operands: List) -> object:
  return protected_log(operands[0])


def _sqrt(operands: List) -> object:
  return np.sqrt(np.abs(operands[0]))


def _abs(operands: List) -> object:
  return np.abs(operands[0])


ADD = Operator(_add, 'add', symbol='+', sympy_function=lambda args: sp.Add(*args))
SUBTRACT = Operator(_subtract, 'subtract', arity=2, symbol='-', sympy_function=lambda args: args[0] - args[1])
MULTIPLY = Operator(_multiply, 'multiply', symbol='*', sympy_function=lambda args: sp.Mul(*args))
DIVIDE = Operator(_divide, 'divide', arity=2, symbol='/', sympy_function=lambda args: args[0] / args[1])
POWER = Operator(_power, 'power', arity=2, symbol='^', sympy_function=lambda args: sp.Pow(args[0], args[1]))
NEGATE = Operator(_negate, 'negate', arity=1, sympy_function=lambda args: -args[0])
SIN = Operator(_sin, 'sin', arity=1, sympy_function=lambda args: sp.sin(args[0]))
COS = Operator(_cos, 'cos', arity=1, sympy_function=lambda args: sp.cos(args[0]))
EXP = Operator(_exp, 'exp', arity=1, sympy_function=lambda args: sp.exp(args[0]))
LOG = Operator(_log, 'log', arity=1, sympy_function=lambda args: sp.log(sp.Abs(args[0])))
SQRT = Operator(_sqrt, 'sqrt', arity=1, sympy_function=lambda args: sp.sqrt(sp.Abs(args[0])))
ABS = Operator(_abs, 'abs', arity=1, sympy_function=lambda args: sp.Abs(args[0]))

BUILTIN_OPERATORS: Dict[str, Operator] = {
  op.name: op for op in (ADD, SUBTRACT, MULTIPLY, DIVIDE, POWER, NEGATE, SIN, COS, EXP, LOG, SQRT, ABS)
}


def get_operator(name: str) -> Operator:
  try:
    return BUILTIN_OPERATORS[name]
  except KeyError:
    raise KeyError(f"Unknown operator '{name}'") from None
