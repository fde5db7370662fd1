"""
Terminal interface for the heat pump commissioning form.
"""
