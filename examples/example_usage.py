import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_expressions import (
  TreeBuilder, VarNotFound, LogLevel, configure_logging,
  accumulate, reduce, tree_to_string, tree_size, latex_representation
)


def build_body(builder):
  """Front-end stand-in: 2 * 3 + sin(x) / x"""
  x = builder.variable("x")
  tree = builder.operator("add", [
    builder.operator("multiply", [builder.constant(2.0), builder.constant(3.0)]),
    builder.operator("divide", [builder.operator("sin", [x]), x]),
  ])
  builder.define("tree", tree)


def main():
  configure_logging(LogLevel.MINIMAL)

  builder = TreeBuilder()
  tree, variables = builder.build(build_body, "tree")
  print(f"Built: {tree_to_string(tree)} ({tree_size(tree)} nodes), needs {sorted(variables)}")

  reduce(tree)
  print(f"Reduced: {tree_to_string(tree)} ({tree_size(tree)} nodes)")
  print(f"LaTeX: {latex_representation(tree)}")

  x = np.linspace(-2.0, 2.0, 5)
  print(f"Values at {x}: {accumulate(tree, {'x': x})}")

  try:
    accumulate(tree, {})
  except VarNotFound as e:
    print(f"Expected failure: {e}")


if __name__ == "__main__":
  main()
