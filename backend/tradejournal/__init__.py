"""
Trade journal backend.
"""
