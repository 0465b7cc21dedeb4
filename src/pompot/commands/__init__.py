"""
pompot.commands - CLI command implementations
"""
