"""core/ -- Kernel modules shared by every layer (configuration).

Layer rule: core/ imports only stdlib + third-party libraries.
"""
