"""
Core infrastructure: settings, logging, database access, security
helpers and the error taxonomy shared by the rest of the application.
"""
