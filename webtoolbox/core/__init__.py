"""Core utilities and shared primitives.

Modules in this package hold configuration, markup construction, request
middleware and the wiring that installs the helpers into a host application.
"""
