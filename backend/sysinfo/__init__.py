"""
System info backend.
"""
