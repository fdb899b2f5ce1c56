"""
Desktop UI Module
"""
