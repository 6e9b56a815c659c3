"""YAManager dashboard package.

This package is organized by feature modules (calendar, employees, settings,
dashboard) with a thin Flask controller layer over service/source layers.
"""
