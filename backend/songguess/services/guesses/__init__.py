"""Guess domain services: ranking helpers and the guess endpoint controller.

HTTP routes import from here so the read/update rules stay independent of
Flask, the database session and the Socket.IO transport.
"""
