"""
Pulse Wellness Application Package
"""
