"""School dashboard package.

Organised by feature modules (students, attendance, leaves, ...) on top of a
single in-memory state store, with a thin Flask controller layer.
"""
