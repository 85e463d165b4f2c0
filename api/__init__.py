"""
HTTP API for the Strategic Advisor.
"""
