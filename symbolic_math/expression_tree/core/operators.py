import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  SIN = 5
  NEG = 6

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {'sin': OpType.SIN, 'neg': OpType.NEG}

# Scalar kernels used for constant folding. error_model='numpy' keeps IEEE
# results (1/0 -> inf, 0/0 -> nan) instead of raising ZeroDivisionError.
@numba.njit(cache=True, error_model='numpy')
def apply_binary_op(lhs, rhs, op_type):
  if op_type == OpType.ADD:
    return lhs + rhs
  elif op_type == OpType.SUB:
    return lhs - rhs
  elif op_type == OpType.MUL:
    return lhs * rhs
  elif op_type == OpType.DIV:
    return lhs / rhs
  elif op_type == OpType.POW:
    return lhs ** rhs
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def apply_unary_op(operand, op_type):
  if op_type == OpType.SIN:
    return np.sin(operand)
  elif op_type == OpType.NEG:
    return -operand
  return np.nan

def evaluate_binary_op(left_val, right_val, operator):
  """Apply `operator` to scalars or arrays with IEEE semantics"""
  with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
    if operator == '+':
      return np.add(left_val, right_val)
    elif operator == '-':
      return np.subtract(left_val, right_val)
    elif operator == '*':
      return np.multiply(left_val, right_val)
    elif operator == '/':
      return np.divide(left_val, right_val)
    elif operator == '^':
      return np.power(left_val, right_val)
  raise ValueError(f"Unknown binary operator: {operator}")

def evaluate_unary_op(operand_val, operator):
  with np.errstate(invalid='ignore'):
    if operator == 'sin':
      return np.sin(operand_val)
    elif operator == 'neg':
      return np.negative(operand_val)
  raise ValueError(f"Unknown unary operator: {operator}")
