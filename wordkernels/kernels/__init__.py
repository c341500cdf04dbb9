"""
Kernel layer.

- `wordkernels/kernels/exercises/` contains kernel descriptors (.yaml).
- `wordkernels/kernels/python/` contains the Python kernels that implement them and
  are cross-validated variant against variant.
"""
