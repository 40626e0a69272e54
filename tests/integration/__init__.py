"""
Integration Tests - Complete Validation Sessions.
"""
