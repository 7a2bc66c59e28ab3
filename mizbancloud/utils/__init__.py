"""
Utilities: configuration, logging and argument validation
"""
