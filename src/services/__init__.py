"""Business logic services used by handlers.

Handlers import services lazily so a cold start only pays for the HTTP
client when a transfer is actually requested.
"""
