"""
Strategic Advisor core: response formatting, PDF export, delivery and dispatch.
"""
