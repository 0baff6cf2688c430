"""
Helper Functions

Contains utility functions used throughout the application.
"""

from flask import request


def get_player_key(username: str, request_obj=None) -> str:
    """
    Build the opaque key a player's history is stored under.

    The key combines the username with the connecting IP address, so the same
    name used from two machines keeps two separate histories.
    """
    if request_obj is None:
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'
    return f"{username}|{user_ip}"
