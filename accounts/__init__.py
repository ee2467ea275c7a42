"""accounts/ -- User records, password hashing, and the signup/login flow.

Layer rule: accounts/ imports only stdlib, third-party libraries, and core/.
It does NOT import from web/. web/ imports from accounts/, not the other way
around.
"""
