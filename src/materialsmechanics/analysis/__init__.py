"""
Calculation Engine
==================
Pure, stateless models mapping physical inputs to derived mechanical
quantities, one module per loading mode.

Note: These modules should be pure Python/NumPy and should NOT import any
UI or network code.
"""
