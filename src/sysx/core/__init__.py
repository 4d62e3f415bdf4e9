"""
sysx Core Module

Exceptions, configuration and logging shared by all sysx modules.
"""
