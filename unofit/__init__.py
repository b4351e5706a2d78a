"""
UnoFit status dashboard backend
"""
