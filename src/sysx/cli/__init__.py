"""
sysx CLI Module

Command-line interface for the sysx utilities.
"""
