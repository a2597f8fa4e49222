"""
moresettings - number validation with dynamic bounds and a settings grid search.
"""

__version__ = "0.1.0"
