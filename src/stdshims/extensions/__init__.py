"""Extension functions, one module per extended type.

Every function takes the extended value as its first argument.
"""
