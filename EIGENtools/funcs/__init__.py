"""
EIGENtools function modules.
"""
