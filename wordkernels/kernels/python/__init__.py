"""
Python kernels.

These modules are designed to be:
- deterministic (fixed-width unsigned words, no overflow),
- easy to audit (one assignment per step, as the kernel is described),
- small surface-area (in-place operations on `Word` slots),
- cross-validated: every variant of a kernel is checked against the others.
"""
