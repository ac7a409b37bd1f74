"""
Utility modules for eztotp
"""
