"""
Command line interface for slidemend
"""
