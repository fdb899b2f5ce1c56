"""
Feature Modules
"""
