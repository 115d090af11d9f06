"""Office Service package.

This package is organized by feature modules (users, roles, offices)
with a thin Flask controller layer over service/repository layers.
"""
